"""
Core data types and manifest assembly.
"""

from .types import ArticleRecord, FrontMatterValue, ManifestResult

__all__ = ["ArticleRecord", "FrontMatterValue", "ManifestResult"]
