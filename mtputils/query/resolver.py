"""Resolution of query terms against a parsed listing."""

from typing import Any

from mtputils.listing.models import FileRecord, ListingIndex
from mtputils.query.terms import QueryTerm, TermKind, classify_terms


def resolve(index: ListingIndex, terms: list[QueryTerm]) -> list[FileRecord]:
    """
    Resolve query terms to a deduplicated list of records.

    Names are visited in lexicographic order. For each name the terms are
    tried in the order given and the first literal or wildcard term that
    matches adds every id under that name. A numeric id term adds just its
    own id the first time it is reached, whichever name is being visited,
    so ids asked for by number come before the rest of their name's bucket:
    ["11", "photo.jpg"] gives 11 then 10. With no terms, every record is
    returned.

    Each id appears at most once in the result. Terms that match nothing
    are dropped silently; see unmatched_terms().
    """
    if not terms:
        return index.records()

    results: list[FileRecord] = []
    seen: set[int] = set()

    for name in index.names():
        ids: list[int] = []
        for term in terms:
            if term.kind is TermKind.NUMERIC_ID:
                if term.file_id in index.by_id and term.file_id not in seen:
                    ids.append(term.file_id)
                continue
            if term.matches_name(name):
                ids.extend(index.by_name[name])
                break

        for file_id in ids:
            if file_id in seen:
                continue
            seen.add(file_id)
            results.append(index.by_id[file_id])

    return results


def resolve_queries(index: ListingIndex, queries: list[str] | tuple[str, ...]) -> list[FileRecord]:
    return resolve(index, classify_terms(queries))


def unmatched_terms(index: ListingIndex, terms: list[QueryTerm]) -> list[QueryTerm]:
    """Return the terms that match no id and no name in the listing."""
    unmatched = []
    for term in terms:
        if term.kind is TermKind.NUMERIC_ID:
            if term.file_id not in index.by_id:
                unmatched.append(term)
        elif not any(term.matches_name(name) for name in index.by_name):
            unmatched.append(term)
    return unmatched


def simple_view(records: list[FileRecord]) -> list[str]:
    return [record.name for record in records]


def detailed_view(records: list[FileRecord]) -> list[dict[str, Any]]:
    return [
        {
            "name": record.name,
            "id": record.id,
            "parent_id": record.parent_id,
            "size": record.size,
        }
        for record in records
    ]
