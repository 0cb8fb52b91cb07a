"""Enumerate article files in the articles directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import FileSystemError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def list_markdown_files(articles_dir: Path) -> list[str]:
    """Return the names of ``*.md`` files in ``articles_dir``.

    Names are sorted so repeated runs see the same order regardless of
    platform directory iteration. Entries that are not regular files are
    ignored.

    Raises:
        FileSystemError: If the directory is missing or unreadable
    """
    try:
        entries = list(articles_dir.iterdir())
    except OSError as exc:
        raise FileSystemError(f"Cannot list articles directory {articles_dir}: {exc}") from exc

    names: list[str] = []
    for entry in entries:
        if not entry.name.endswith(MARKDOWN_SUFFIX):
            continue
        if not entry.is_file():
            logger.debug("Skipping non-file entry %s", entry)
            continue
        names.append(entry.name)
    return sorted(names)


def read_article(path: Path) -> str:
    """Read one article as UTF-8 text.

    Raises:
        FileSystemError: If the file cannot be read or decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemError(f"Cannot read article {path}: {exc}") from exc
