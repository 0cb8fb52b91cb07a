"""Write the serialized manifest to disk."""

from __future__ import annotations

from pathlib import Path

from ..errors import FileSystemError


def write_manifest(text: str, output_path: Path) -> Path:
    """Overwrite ``output_path`` with ``text``.

    The write is not atomic and no backup of the previous manifest is kept.

    Raises:
        FileSystemError: If the file or its parent directory cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(f"Cannot write manifest {output_path}: {exc}") from exc
    return output_path
