"""Error types raised by the manifest pipeline.

Both concrete errors are fatal: the run aborts and no manifest is written.
Malformed front matter is deliberately not represented here.
"""

from __future__ import annotations


class ManifestError(Exception):
    """Base class for manifest generation failures."""


class FileSystemError(ManifestError):
    """Articles directory or an article file could not be read, or the
    manifest could not be written."""


class SerializationError(ManifestError):
    """Assembled records could not be encoded as JSON."""
