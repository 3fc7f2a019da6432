"""Tab completion of file names and ids from the captured listing."""

from pathlib import Path

import click
from click.shell_completion import CompletionItem

from mtputils.config import Config
from mtputils.errors import MissingListingError
from mtputils.listing import ListingIndex, parse_listing


def completion_candidates(index: ListingIndex) -> list[str]:
    """All known ids (as strings) followed by all known names."""
    return [str(file_id) for file_id in index.by_id] + list(index.by_name)


def complete(index: ListingIndex, incomplete: str) -> list[str]:
    candidates = completion_candidates(index)
    matches = [c for c in candidates if c.startswith(incomplete)]
    if not matches and incomplete:
        matches = [c for c in candidates if incomplete in c]
    return matches


def shell_complete(ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
    listing_path: Path | None = ctx.find_root().params.get("listing")
    try:
        index = parse_listing(listing_path or Config().listing_path)
    except (MissingListingError, OSError):
        return []
    return [CompletionItem(candidate) for candidate in complete(index, incomplete)]
