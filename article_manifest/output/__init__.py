"""Manifest output helpers."""

from .writer import write_manifest

__all__ = ["write_manifest"]
