"""
Front-matter extraction and parsing for article markdown files.

Articles start with a header block:

    ---
    title: "Closures in React"
    date: 2025-05-10
    tags: [react, closure, component]
    draft: false
    ---

Only a flat ``key: value`` subset is understood. Values are coerced to
booleans, unquoted strings, or single-level string lists; anything else
stays a trimmed string. This is intentionally not a YAML parser: existing
content relies on the naive quote and list handling below.
"""

from __future__ import annotations

import logging
import re

from ..core.types import ArticleRecord, FrontMatterValue

logger = logging.getLogger(__name__)


# Anchored at the start of the text; non-greedy so only the first block matches.
FRONT_MATTER_RE = re.compile(r"^---\n(.*?)\n---", re.DOTALL)


def extract_front_matter(text: str) -> str:
    """Return the text between the leading ``---`` delimiter lines.

    Returns an empty string when the file does not open with a
    front-matter block.
    """
    match = FRONT_MATTER_RE.match(text)
    if match is None:
        return ""
    return match.group(1)


def parse_front_matter(block: str) -> ArticleRecord:
    """Parse a front-matter block into an ordered record.

    Each line is split at its first ``:``. Lines without a colon are
    skipped; duplicate keys keep the last value.

    Args:
        block: Text returned by :func:`extract_front_matter`

    Returns:
        Mapping of field name to coerced value, in the order keys first
        appear in the block.
    """
    record: ArticleRecord = {}
    for line in block.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            # TODO: surface these through a --strict mode once existing articles are cleaned up.
            if line.strip():
                logger.debug("Skipping front-matter line without ':': %r", line)
            continue
        record[key.strip()] = parse_value(value.strip())
    return record


def parse_value(value: str) -> FrontMatterValue:
    """Coerce a trimmed front-matter value.

    Examples:
        >>> parse_value("true")
        True
        >>> parse_value('"Hello: world"')
        'Hello: world'
        >>> parse_value("[react, closure, component]")
        ['react', 'closure', 'component']
    """
    if value == "true":
        return True
    if value == "false":
        return False
    if value.startswith('"'):
        return _strip_quotes(value)
    if value.startswith("["):
        return _parse_list(value)
    return value


def _strip_quotes(value: str) -> str:
    # No escape handling: only one quote is removed from each end.
    inner = value[1:]
    if inner.endswith('"'):
        inner = inner[:-1]
    return inner


def _parse_list(value: str) -> list[str]:
    inner = value[1:]
    if inner.endswith("]"):
        inner = inner[:-1]
    return [item.strip() for item in inner.split(",")]
