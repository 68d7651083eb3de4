"""Exception types raised by the file and JSON helpers."""

from __future__ import annotations

from pathlib import Path


class FilesystemError(Exception):
    """Base exception for fylesystem failures."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = Path(path) if path is not None else None


class FileIOError(FilesystemError):
    """Raised when opening, reading, writing, closing or removing a file fails."""


class SerializationError(FilesystemError):
    """Raised when a value cannot be encoded to, or decoded from, JSON."""


__all__ = ["FileIOError", "FilesystemError", "SerializationError"]
