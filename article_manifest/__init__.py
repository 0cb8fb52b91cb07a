"""
Article Manifest - JSON index builder for a markdown blog.

This package scans a directory of markdown articles, reads the flat
front-matter header of each one, drops drafts, sorts the rest by date
(newest first) and writes a pretty-printed JSON manifest for the site.

Main entry point is the CLI via `article-manifest generate` command.

Example:
    $ article-manifest generate -a articles -o manifest.json
"""

__all__ = [
    "__version__",
    "assemble_manifest",
    "build_record",
    "extract_front_matter",
    "parse_front_matter",
    "run_pipeline",
]
__version__ = "0.1.0"

from .core.manifest import assemble_manifest, build_record
from .input.front_matter import extract_front_matter, parse_front_matter
from .runner import run_pipeline
