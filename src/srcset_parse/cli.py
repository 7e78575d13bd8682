"""CLI module for srcset-parse."""

import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from srcset_parse import __version__
from srcset_parse.candidate import ImageCandidate
from srcset_parse.html import extract_image_sources
from srcset_parse.logging import configure_logging, get_logger
from srcset_parse.parser import parse
from srcset_parse.utils import resolve_image_url

STDIN_MARKER = "-"

console = Console()

app = typer.Typer(
    name="srcset-parse",
    help="Parse srcset attributes of responsive images.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: Whether the version flag was provided.
    """
    if value:
        console.print(f"srcset-parse version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Parse srcset attributes of responsive images."""
    # Initialize logging once at startup
    configure_logging(verbose=verbose)
    log = get_logger()

    if verbose:
        log.debug("Verbose mode enabled")


def _resolve(
    candidates: Sequence[ImageCandidate], base_url: str | None
) -> list[ImageCandidate]:
    """Return candidates with URLs resolved against base_url, if given."""
    if base_url is None:
        return list(candidates)
    return [
        ImageCandidate(
            url=resolve_image_url(base_url, candidate.url),
            width=candidate.width,
            density=candidate.density,
        )
        for candidate in candidates
    ]


def _to_dict(candidate: ImageCandidate) -> dict[str, str | float | None]:
    return {
        "url": candidate.url,
        "width": candidate.width,
        "density": candidate.density,
    }


def _format_number(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{value:g}"


def print_candidates(
    candidates: Sequence[ImageCandidate], title: str | None = None
) -> None:
    """Print candidates as a Rich table.

    Args:
        candidates: Candidates to display, in order.
        title: Optional table title.
    """
    if not candidates:
        console.print("[yellow]No candidates found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("URL", overflow="fold")
    table.add_column("Width", justify="right")
    table.add_column("Density", justify="right")

    for position, candidate in enumerate(candidates, start=1):
        table.add_row(
            str(position),
            escape(candidate.url),
            _format_number(candidate.width),
            _format_number(candidate.density),
        )

    console.print(table)


@app.command(name="parse")
def parse_cmd(
    srcset: Annotated[
        str, typer.Argument(help=f"srcset value to parse, or '{STDIN_MARKER}' to read stdin")
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print candidates as JSON")
    ] = False,
    base_url: Annotated[
        str | None, typer.Option("--base-url", help="Resolve candidate URLs against this URL")
    ] = None,
) -> None:
    """Parse a srcset attribute value and print its candidates."""
    log = get_logger()

    text = sys.stdin.read() if srcset == STDIN_MARKER else srcset
    candidates = _resolve(parse(text), base_url)
    log.debug("Parsed srcset", candidates=len(candidates))

    if as_json:
        typer.echo(json.dumps([_to_dict(c) for c in candidates], indent=2))
        return

    print_candidates(candidates)


@app.command(name="html")
def html_cmd(
    path: Annotated[
        str, typer.Argument(help=f"HTML file to scan, or '{STDIN_MARKER}' to read stdin")
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print image sources as JSON")
    ] = False,
    base_url: Annotated[
        str | None, typer.Option("--base-url", help="Resolve candidate URLs against this URL")
    ] = None,
) -> None:
    """Extract and parse srcset attributes of img and source elements."""
    log = get_logger()

    if path == STDIN_MARKER:
        html = sys.stdin.read()
    else:
        try:
            html = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.error("Failed to read HTML file", path=path, error=str(e))
            console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(e))}")
            raise typer.Exit(code=1) from None

    sources = extract_image_sources(html)
    log.debug("Scanned HTML", path=path, sources=len(sources))

    if as_json:
        payload = [
            {
                "tag": source.tag,
                "attribute": source.attribute,
                "candidates": [_to_dict(c) for c in _resolve(source.candidates, base_url)],
            }
            for source in sources
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    if not sources:
        console.print("[yellow]No image sources found[/yellow]")
        return

    for source in sources:
        print_candidates(
            _resolve(source.candidates, base_url),
            title=escape(f"<{source.tag} {source.attribute}>"),
        )


if __name__ == "__main__":
    app()
