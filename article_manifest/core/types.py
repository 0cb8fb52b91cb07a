"""
Core data types for the manifest generator.

- ArticleRecord: Schema-less mapping parsed from one article's front matter
- ManifestResult: Outcome of a single manifest generation run
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

FrontMatterValue = Union[str, bool, list[str]]
ArticleRecord = dict[str, FrontMatterValue]


@dataclass
class ManifestResult:
    """Summary of a manifest generation run.

    Attributes:
        output_path: Where the manifest was (or would have been) written
        scanned: Number of markdown files read
        drafts: Number of records dropped because ``draft`` was true
        records: Published records in manifest order
        text: Serialized JSON exactly as written
        written: False for dry runs
    """

    output_path: Path
    scanned: int = 0
    drafts: int = 0
    records: list[ArticleRecord] = field(default_factory=list)
    text: str = ""
    written: bool = True

    @property
    def published(self) -> int:
        return len(self.records)
