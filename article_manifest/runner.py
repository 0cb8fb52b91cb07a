"""
Pipeline orchestration for the manifest generator.

A run is a single synchronous pass:
1. List ``*.md`` files in the articles directory
2. Read each file, extract and parse its front matter, attach the slug
3. Drop drafts and sort by date, newest first
4. Serialize to JSON and overwrite the manifest file

Any filesystem or encoding failure aborts the run before the manifest is
touched, so a previous manifest survives a failed run.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import AppConfig
from .core.manifest import assemble_manifest, build_record, derive_slug, serialize_manifest
from .core.types import ArticleRecord, ManifestResult
from .input.lister import list_markdown_files, read_article
from .output.writer import write_manifest
from .utils.logging import log_event, setup_logging


def load_records(articles_dir: Path, logger: logging.Logger | None = None) -> list[ArticleRecord]:
    """Read every article in ``articles_dir`` into a record.

    Raises:
        FileSystemError: If the directory or any article cannot be read
    """
    records: list[ArticleRecord] = []
    for name in list_markdown_files(articles_dir):
        text = read_article(articles_dir / name)
        record = build_record(text, derive_slug(name))
        log_event(
            logger,
            "Article parsed",
            event="article_parsed",
            file=name,
            fields=len(record) - 1,
        )
        records.append(record)
    return records


def run_pipeline(
    cfg: AppConfig,
    console: Console | None = None,
    dry_run: bool = False,
) -> ManifestResult:
    """Generate the manifest described by ``cfg``.

    Args:
        cfg: Application configuration
        console: Rich console for the completion message (creates default if None)
        dry_run: Build and serialize the manifest without writing it

    Returns:
        ManifestResult describing the run

    Raises:
        FileSystemError: Directory or article unreadable, or manifest unwritable
        SerializationError: Records cannot be encoded as JSON
    """
    console = console or Console()
    articles_dir = Path(cfg.paths.articles_dir)
    output_path = Path(cfg.paths.output_path)
    # Dry runs leave the filesystem untouched, log file included.
    logger = setup_logging(cfg.logging, None if dry_run else output_path.parent)

    log_event(
        logger,
        "Manifest start",
        event="manifest_start",
        articles_dir=str(articles_dir),
        output=str(output_path),
    )

    records = load_records(articles_dir, logger)
    manifest = assemble_manifest(records)
    drafts = len(records) - len(manifest)
    if drafts:
        log_event(logger, "Drafts skipped", event="draft_skipped", count=drafts)

    text = serialize_manifest(
        manifest,
        indent=cfg.output.indent,
        ensure_ascii=cfg.output.ensure_ascii,
    )
    result = ManifestResult(
        output_path=output_path,
        scanned=len(records),
        drafts=drafts,
        records=manifest,
        text=text,
        written=not dry_run,
    )

    if dry_run:
        return result

    write_manifest(text, output_path)
    log_event(
        logger,
        "Manifest written",
        event="manifest_written",
        output=str(output_path),
        published=result.published,
        drafts=drafts,
    )
    console.print(f"✓ Generated {escape(str(output_path))} with {result.published} articles")
    return result
