"""
Manifest assembly: per-article records, draft filtering, ordering and
JSON serialization.
"""

from __future__ import annotations

import json
from typing import Iterable

from ..errors import SerializationError
from ..input.front_matter import extract_front_matter, parse_front_matter
from .types import ArticleRecord

SLUG_SUFFIX = ".md"


def derive_slug(file_name: str) -> str:
    """Strip the trailing ``.md`` from an article file name."""
    if file_name.endswith(SLUG_SUFFIX):
        return file_name[: -len(SLUG_SUFFIX)]
    return file_name


def build_record(text: str, slug: str) -> ArticleRecord:
    """Parse an article's front matter and attach its slug.

    ``slug`` is always the last key; a ``slug`` field in the front matter
    is replaced by the derived value.
    """
    record = parse_front_matter(extract_front_matter(text))
    record.pop("slug", None)
    record["slug"] = slug
    return record


def is_draft(record: ArticleRecord) -> bool:
    # Only a literal boolean true marks a draft; "yes" or "True" do not.
    return record.get("draft") is True


def filter_drafts(records: Iterable[ArticleRecord]) -> list[ArticleRecord]:
    return [record for record in records if not is_draft(record)]


def sort_by_date(records: Iterable[ArticleRecord]) -> list[ArticleRecord]:
    """Stable sort by ``date`` descending using plain string comparison.

    Dates are not parsed, so callers need a zero-padded format such as
    ``YYYY-MM-DD``. Records without a string date go last.
    """
    return sorted(records, key=_date_key, reverse=True)


def _date_key(record: ArticleRecord) -> tuple[bool, str]:
    date = record.get("date")
    if isinstance(date, str):
        return True, date
    return False, ""


def assemble_manifest(records: Iterable[ArticleRecord]) -> list[ArticleRecord]:
    """Drop drafts and order the rest newest first."""
    return sort_by_date(filter_drafts(records))


def serialize_manifest(
    records: list[ArticleRecord],
    indent: int = 2,
    ensure_ascii: bool = False,
) -> str:
    """Encode the manifest as pretty-printed JSON with a trailing newline.

    Raises:
        SerializationError: If a value cannot be encoded
    """
    try:
        text = json.dumps(records, ensure_ascii=ensure_ascii, indent=indent, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode manifest: {exc}") from exc
    return f"{text}\n"
