"""Filesystem capability injected into the update pipeline."""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """Writes and deletes files on the local disk."""

    def write_bytes(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def delete(self, path: Path) -> None:
        path.unlink()
