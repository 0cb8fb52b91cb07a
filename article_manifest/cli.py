"""
Command-line interface for the article manifest generator.

Uses Typer to expose the configured paths as options. With no options the
tool reads ``articles/`` and writes ``manifest.json`` in the current
directory. Supports loading .env files for path overrides.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .errors import ManifestError
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Build the JSON manifest of published articles."""


@app.command()
def generate(
    articles_dir: Path | None = typer.Option(
        None,
        "--articles-dir",
        "-a",
        envvar="ARTICLE_MANIFEST_ARTICLES_DIR",
        help="Directory containing *.md articles.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        envvar="ARTICLE_MANIFEST_OUTPUT",
        help="Manifest file to overwrite.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the manifest instead of writing it."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Generate the article manifest.

    Scans the articles directory, parses front matter, drops drafts,
    sorts by date descending and writes pretty-printed JSON.

    Args:
        articles_dir: Override the configured articles directory
        output: Override the configured manifest path
        config: Optional path to YAML config file
        dry_run: Print the JSON to stdout without writing
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    load_dotenv()

    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if articles_dir is not None:
        cfg.paths.articles_dir = str(articles_dir)
    if output is not None:
        cfg.paths.output_path = str(output)
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        result = run_pipeline(cfg, console=console, dry_run=dry_run)
    except ManifestError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if dry_run:
        typer.echo(result.text, nl=False)


if __name__ == "__main__":
    app()
