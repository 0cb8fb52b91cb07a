"""
Input parsing utilities.

This package lists article files and parses their front matter.
"""

from .front_matter import extract_front_matter, parse_front_matter, parse_value
from .lister import list_markdown_files, read_article

__all__ = [
    "extract_front_matter",
    "parse_front_matter",
    "parse_value",
    "list_markdown_files",
    "read_article",
]
