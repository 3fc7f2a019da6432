"""CLI interface for mtputils."""

import logging
import sys
from pathlib import Path

import click

from mtputils.completion import shell_complete
from mtputils.config import Config
from mtputils.errors import MTPUtilsError
from mtputils.fetch import Fetcher, GetfileRunner
from mtputils.listing import FileRecord, ListingIndex, parse_listing
from mtputils.query import classify_terms, detailed_view, resolve, simple_view, unmatched_terms


@click.group()
@click.option(
    "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the mtp-files output (default: mtp-files.out)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, listing: Path | None, verbose: bool) -> None:
    """Utilities for working with MTP devices through mtp-tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    config = Config()
    if listing is not None:
        config.listing_path = listing
    ctx.obj["config"] = config


def _load_index(config: Config) -> ListingIndex:
    try:
        return parse_listing(config.listing_path, config.capture_command)
    except MTPUtilsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def _find_files(index: ListingIndex, queries: tuple[str, ...]) -> list[FileRecord]:
    terms = classify_terms(queries)
    for term in unmatched_terms(index, terms):
        click.echo(f"Warning: No file matches '{term.text}'", err=True)
    return resolve(index, terms)


@cli.command("ls")
@click.argument("queries", nargs=-1, shell_complete=shell_complete)
@click.option("-l", "--detail", is_flag=True, help="Show id, parent id and size")
@click.pass_context
def list_files(ctx: click.Context, queries: tuple[str, ...], detail: bool) -> None:
    """List files in mtp-files.out matching names, ids or wildcards.

    Create the listing first with:

        mtp-files > mtp-files.out
    """
    config: Config = ctx.obj["config"]
    index = _load_index(config)
    records = _find_files(index, queries)

    if not detail:
        for name in simple_view(records):
            click.echo(name)
        return

    rows = detailed_view(records)
    if not rows:
        return

    header = "Name".ljust(40) + "ID".rjust(10) + "Parent".rjust(10) + "Size".rjust(12)
    click.echo(header)
    click.echo("-" * len(header))
    for row in rows:
        parent = "" if row["parent_id"] is None else str(row["parent_id"])
        click.echo(
            f"{_truncate(row['name'], 39):<40}"
            f"{row['id']:>10}"
            f"{parent:>10}"
            f"{_format_bytes(row['size']):>12}"
        )


@cli.command("get")
@click.argument("files", nargs=-1, required=True, shell_complete=shell_complete)
@click.option("-O", "--overwrite", is_flag=True, help="Overwrite existing local files")
@click.option(
    "--dest",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Directory to save files into",
)
@click.pass_context
def get_files(ctx: click.Context, files: tuple[str, ...], overwrite: bool, dest: Path) -> None:
    """Get files from the device (wrapper for mtp-getfile).

    FILES are names, ids or wildcards looked up in mtp-files.out.
    """
    config: Config = ctx.obj["config"]
    index = _load_index(config)
    records = _find_files(index, files)

    runner = GetfileRunner(config.getfile_command)
    fetcher = Fetcher(runner, overwrite=overwrite, dest_dir=dest)

    try:
        stats = fetcher.fetch_all(records)
    except MTPUtilsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    click.echo(
        f"Fetched {stats.fetched:,} of {stats.total:,} files "
        f"({stats.skipped:,} skipped, {stats.failed:,} failed)"
    )
    if stats.failed:
        sys.exit(1)


def _format_bytes(size: int | None) -> str:
    if size is None:
        return "-"
    size_f = float(size)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_f < 1024:
            return f"{size_f:.1f} {unit}"
        size_f /= 1024
    return f"{size_f:.1f} PB"


def _truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return "..." + text[-(max_len - 3) :]


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
