"""Command line interface for FileSubstrings."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from filesubstrings.config import (
    DEFAULT_MIN_OCCURRENCE_COUNT,
    DEFAULT_MIN_SUBSTRING_LENGTH,
    ExtractorConfig,
)
from filesubstrings.errors import AccessDenied, ExtractionError, PathNotFound, PathTooLong
from filesubstrings.extractor import SubstringExtractor


console = Console()
app = typer.Typer(help="FileSubstrings - find recurring words in file names")

_ERROR_MESSAGES = {
    PathNotFound: "Could not find directory",
    AccessDenied: "Could not access directory",
    PathTooLong: "Directory path is too long",
}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_substrings(extractor: SubstringExtractor) -> None:
    entries = extractor.substrings()
    console.print(f"Scanned {extractor.file_count} files.")
    if not entries:
        console.print("[yellow]No substrings found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Substring")
    table.add_column("Occurrences", justify="right")
    for entry in entries:
        table.add_row(escape(entry.token), str(entry.occurrence_count))
    console.print(table)


def _print_files(extractor: SubstringExtractor, substring: str, full_path: bool) -> None:
    files = extractor.get_files(substring)
    if not files:
        console.print(f'[yellow]Found no files containing "{escape(substring)}"[/yellow]')
        return
    for ref in files:
        console.print(
            ref.full_path if full_path else ref.name,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


@app.command()
def scan(
    root: Path = typer.Argument(
        None, help="Directory to scan (default: current directory).", show_default=False
    ),
    min_length: int = typer.Option(
        DEFAULT_MIN_SUBSTRING_LENGTH, "--min-length", "-l", min=0, help="Minimum substring length"
    ),
    min_occurrences: int = typer.Option(
        DEFAULT_MIN_OCCURRENCE_COUNT,
        "--min-occurrences",
        "-o",
        min=0,
        help="Minimum number of occurrences of a substring",
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-c", min=0, help="Maximum number of results shown"
    ),
    substring: Optional[str] = typer.Option(
        None, "--substring", "-s", help="Show the files containing this substring"
    ),
    full_path: bool = typer.Option(False, "--full-path", "-f", help="Show full paths of files"),
    unique: bool = typer.Option(
        False, "--unique", help="Count a substring at most once per file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List substrings shared by file names below ROOT, or the files for one substring."""
    _setup_logging(verbose)
    config = ExtractorConfig(
        root_path=root if root is not None else Path.cwd(),
        min_substring_length=min_length,
        min_occurrence_count=min_occurrences,
        max_results=count,
        unique_per_file=unique,
    )
    config = replace(config, root_path=config.resolve_root(Path.cwd()))
    extractor = SubstringExtractor(config)

    try:
        if substring is not None:
            _print_files(extractor, substring, full_path)
        else:
            _print_substrings(extractor)
    except ExtractionError as exc:
        message = _ERROR_MESSAGES.get(type(exc), "Could not scan directory")
        console.print(f"[red]{message} {escape(str(exc.path))}[/red]", soft_wrap=True)
        raise typer.Exit(code=1) from exc
