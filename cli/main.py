"""blogseo CLI — fetch blog posts and score their structure.

Usage:
    blogseo --help

Commands:
    fetch       → fetch + parse a post, print a summary
    analyze     → fetch + parse + structure score and checklist
    detect      → publishing-platform detection only
    ai-context  → the payload handed to the AI layer, as JSON
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from blogseo.analysis.ai_context import build_ai_context
from blogseo.analysis.structure import analyze_structure, generate_checklist
from blogseo.log import configure_logging
from blogseo.scraper.fetcher import FetchError
from blogseo.scraper.models import Document
from blogseo.scraper.pipeline import fetch_document
from cli.rendering import render_analysis, render_document

app = typer.Typer(
    name="blogseo",
    help="Blog content extraction and structure scoring.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    configure_logging(log_level or "WARNING")


def _load(url: str, platform_hint: bool = False) -> Document:
    """Fetch *url*, turning pipeline errors into a clean exit."""
    try:
        return fetch_document(url, platform_hint=platform_hint)
    except ValueError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(1)
    except FetchError as exc:
        typer.echo(f"[error] {exc.message}", err=True)
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("fetch")
def fetch(
    url: str = typer.Option(..., help="Blog post URL."),
    text: bool = typer.Option(False, "--text", help="Also print the extracted plain text."),
    as_json: bool = typer.Option(False, "--json", help="Print the full document as JSON."),
    platform_hint: bool = typer.Option(
        False, "--platform-selectors", help="Try the detected platform's content selectors first."
    ),
) -> None:
    """Fetch a blog post and print its metadata and content summary."""
    document = _load(url, platform_hint)
    if as_json:
        typer.echo(json.dumps(document.to_dict(), indent=2, ensure_ascii=False))
        return
    typer.echo(render_document(document))
    if text:
        typer.echo("")
        typer.echo(document.content.plain_text)


@app.command("analyze")
def analyze(
    url: str = typer.Option(..., help="Blog post URL."),
    as_json: bool = typer.Option(False, "--json", help="Print analysis and checklist as JSON."),
    platform_hint: bool = typer.Option(
        False, "--platform-selectors", help="Try the detected platform's content selectors first."
    ),
) -> None:
    """Fetch a blog post and score its structure."""
    document = _load(url, platform_hint)
    analysis = analyze_structure(document)
    checklist = generate_checklist(document, analysis)

    if as_json:
        payload = {"analysis": analysis.to_dict(), "checklist": checklist.to_dict()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(render_document(document))
    typer.echo("")
    typer.echo(render_analysis(analysis, checklist))


@app.command("detect")
def detect(
    url: str = typer.Option(..., help="Blog post URL."),
) -> None:
    """Print the detected publishing platform."""
    document = _load(url)
    typer.echo(document.platform.value)


@app.command("ai-context")
def ai_context(
    url: str = typer.Option(..., help="Blog post URL."),
    max_chars: Optional[int] = typer.Option(
        None, "--max-chars", help="Truncate the plain text to this many characters."
    ),
) -> None:
    """Print the payload handed to the AI layer as JSON."""
    document = _load(url)
    context = build_ai_context(document, max_chars=max_chars)
    typer.echo(json.dumps(context.to_dict(), indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
