"""Tests for query resolution against a listing."""

import pytest

from mtputils.listing import FileRecord, ListingIndex, parse_lines
from mtputils.query import (
    classify_terms,
    detailed_view,
    resolve,
    resolve_queries,
    simple_view,
    unmatched_terms,
)


def _build_index(*records: FileRecord) -> ListingIndex:
    lines = []
    for record in records:
        lines.append(f"File ID: {record.id}")
        lines.append(f"  Filename: {record.name}")
        if record.size is not None:
            lines.append(f"  File size {record.size}")
        if record.parent_id is not None:
            lines.append(f"  Parent ID: {record.parent_id}")
    return parse_lines(lines)


@pytest.fixture
def fruit_index() -> ListingIndex:
    return _build_index(
        FileRecord(id=3, name="banana"),
        FileRecord(id=1, name="apple"),
        FileRecord(id=2, name="avocado"),
    )


@pytest.fixture
def photo_index() -> ListingIndex:
    return _build_index(
        FileRecord(id=10, name="photo.jpg", size=2048, parent_id=1),
        FileRecord(id=11, name="photo.jpg", size=4096, parent_id=1),
        FileRecord(id=5, name="notes.txt", size=17, parent_id=2),
    )


def _ids(records: list[FileRecord]) -> list[int]:
    return [record.id for record in records]


class TestResolveAll:
    """Tests for resolving with no query terms."""

    def test_returns_every_record_sorted_by_name(self, fruit_index: ListingIndex) -> None:
        assert simple_view(resolve(fruit_index, [])) == ["apple", "avocado", "banana"]

    def test_ids_within_name_in_snapshot_order(self) -> None:
        index = _build_index(
            FileRecord(id=30, name="b"),
            FileRecord(id=20, name="a"),
            FileRecord(id=10, name="b"),
        )
        assert _ids(resolve(index, [])) == [20, 30, 10]

    def test_empty_index(self) -> None:
        assert resolve(ListingIndex(), []) == []


class TestResolveLiteral:
    """Tests for exact name queries."""

    def test_duplicate_name_returns_all_ids(self, photo_index: ListingIndex) -> None:
        assert _ids(resolve_queries(photo_index, ["photo.jpg"])) == [10, 11]

    def test_case_sensitive(self, photo_index: ListingIndex) -> None:
        assert resolve_queries(photo_index, ["PHOTO.JPG"]) == []

    def test_unmatched_term_silently_ignored(self, photo_index: ListingIndex) -> None:
        assert _ids(resolve_queries(photo_index, ["missing.txt", "notes.txt"])) == [5]

    def test_results_in_name_order_not_query_order(self, photo_index: ListingIndex) -> None:
        records = resolve_queries(photo_index, ["photo.jpg", "notes.txt"])
        assert _ids(records) == [5, 10, 11]


class TestResolveNumericId:
    """Tests for numeric id queries."""

    def test_returns_only_that_record(self, photo_index: ListingIndex) -> None:
        assert _ids(resolve_queries(photo_index, ["11"])) == [11]

    def test_unknown_id_ignored(self, photo_index: ListingIndex) -> None:
        assert resolve_queries(photo_index, ["999"]) == []

    def test_id_returned_once_when_name_also_matches(self, photo_index: ListingIndex) -> None:
        records = resolve_queries(photo_index, ["11", "photo.jpg"])
        assert _ids(records) == [11, 10]

    def test_id_comes_before_rest_of_its_bucket(self) -> None:
        index = _build_index(
            FileRecord(id=1, name="a.txt"),
            FileRecord(id=2, name="a.txt"),
        )
        assert _ids(resolve_queries(index, ["2", "a.txt"])) == [2, 1]

    def test_multiple_ids_under_one_name(self) -> None:
        index = _build_index(
            FileRecord(id=10, name="photo.jpg"),
            FileRecord(id=11, name="photo.jpg"),
        )
        assert _ids(resolve_queries(index, ["10", "11"])) == [10, 11]

    def test_ids_emitted_in_term_order(self, photo_index: ListingIndex) -> None:
        assert _ids(resolve_queries(photo_index, ["11", "5"])) == [11, 5]


class TestResolveWildcard:
    """Tests for wildcard queries."""

    def test_star_matches_whole_name(self, fruit_index: ListingIndex) -> None:
        assert simple_view(resolve_queries(fruit_index, ["a*"])) == ["apple", "avocado"]

    def test_suffix_pattern(self, photo_index: ListingIndex) -> None:
        assert _ids(resolve_queries(photo_index, ["*.jpg"])) == [10, 11]

    def test_first_matching_term_wins(self, fruit_index: ListingIndex) -> None:
        records = resolve_queries(fruit_index, ["a*", "apple"])
        assert simple_view(records) == ["apple", "avocado"]


class TestDedup:
    """Tests that every id appears at most once."""

    @pytest.mark.parametrize(
        "queries",
        [
            [],
            ["*"],
            ["*", "*"],
            ["photo.jpg", "photo.jpg"],
            ["10", "10", "*.jpg"],
            ["*.jpg", "10", "11", "photo.jpg"],
            ["5", "notes.txt", "n*"],
        ],
    )
    def test_no_duplicate_ids(self, photo_index: ListingIndex, queries: list[str]) -> None:
        ids = _ids(resolve_queries(photo_index, queries))
        assert len(ids) == len(set(ids))


class TestUnmatchedTerms:
    """Tests for unmatched_terms function."""

    def test_reports_unmatched(self, photo_index: ListingIndex) -> None:
        terms = classify_terms(["photo.jpg", "999", "*.gif", "missing.txt", "5"])
        unmatched = unmatched_terms(photo_index, terms)
        assert [term.text for term in unmatched] == ["999", "*.gif", "missing.txt"]

    def test_all_matched(self, photo_index: ListingIndex) -> None:
        assert unmatched_terms(photo_index, classify_terms(["*.txt", "10"])) == []


class TestViews:
    """Tests for simple and detailed projections."""

    def test_simple_view(self, photo_index: ListingIndex) -> None:
        records = resolve(photo_index, [])
        assert simple_view(records) == ["notes.txt", "photo.jpg", "photo.jpg"]

    def test_detailed_view(self, photo_index: ListingIndex) -> None:
        records = resolve_queries(photo_index, ["11"])
        assert detailed_view(records) == [
            {"name": "photo.jpg", "id": 11, "parent_id": 1, "size": 4096}
        ]
