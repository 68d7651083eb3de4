"""
Summary: Thin wrappers around open, append, read, stat, close and delete for text files.
Why: Give the directive composer one error type and one path rule for every file call.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TextIO

from fylesystem.config.settings import ENCODING
from fylesystem.platform.logging import logger

from .errors import FileIOError


def join_path(directory: Path | str, name: str) -> Path:
    """Return ``directory / name``, the single path composition rule."""

    return Path(directory) / name


def open_file(name: str, directory: Path | str) -> TextIO:
    """Create (or truncate) ``directory/name`` and return a writable text handle.

    The handle disables newline translation so the text written through
    ``write`` reaches the disk unchanged on every platform. It can be used as
    a context manager; otherwise the caller closes it with ``close_file``.

    Raises:
        FileIOError: The directory is missing or not writable.
    """

    path = join_path(directory, name)
    try:
        handle = open(path, "w", encoding=ENCODING, newline="")
    except OSError as exc:
        raise FileIOError(f"failed to open file {name}: {exc}", path=path) from exc

    logger.debug(
        "Opened %s",
        path,
        extra={"file_event": "file.open", "path": path, "base_path": str(directory)},
    )
    return handle


def write(handle: TextIO, text: str) -> None:
    """Append ``text`` to the end of the open file.

    Raises:
        FileIOError: The underlying write fails or the handle is closed.
    """

    try:
        _ = handle.write(text)
    except (OSError, ValueError) as exc:
        raise FileIOError(
            f"failed to write file {handle.name}: {exc}", path=handle.name
        ) from exc

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Appended %d characters to %s",
            len(text),
            handle.name,
            extra={"file_event": "file.write", "path": handle.name, "size": len(text)},
        )


def read_file(path: Path | str) -> str:
    """Return the entire contents of ``path`` as text.

    Raises:
        FileIOError: The path does not exist or cannot be read.
    """

    try:
        with open(path, "r", encoding=ENCODING, newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise FileIOError(
            f"failed to read file with path {path}: {exc}", path=path
        ) from exc


def is_empty(handle: TextIO) -> bool:
    """Return whether the file behind ``handle`` currently has size zero.

    Buffered text is flushed first so the size reflects every completed
    ``write`` call.

    Raises:
        FileIOError: The handle is closed or the stat call fails.
    """

    try:
        handle.flush()
        return os.fstat(handle.fileno()).st_size == 0
    except (OSError, ValueError) as exc:
        raise FileIOError(
            f"failed to check file info {handle.name}: {exc}", path=handle.name
        ) from exc


def close_file(handle: TextIO) -> None:
    """Close ``handle``.

    Raises:
        FileIOError: The handle was already closed, or flushing on close failed.
    """

    if handle.closed:
        raise FileIOError(
            f"failed to close file {handle.name}: already closed", path=handle.name
        )

    try:
        handle.close()
    except OSError as exc:
        raise FileIOError(
            f"failed to close file {handle.name}: {exc}", path=handle.name
        ) from exc


def exists(path: Path | str) -> bool:
    """Return whether ``path`` exists; any stat failure counts as missing."""

    try:
        _ = os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def remove(path: Path | str) -> None:
    """Delete the file at ``path``.

    Raises:
        FileIOError: The file does not exist or cannot be removed.
    """

    try:
        os.remove(path)
    except OSError as exc:
        raise FileIOError(f"failed to remove file {path}: {exc}", path=path) from exc

    logger.debug("Removed %s", path, extra={"file_event": "file.remove", "path": path})


__all__ = [
    "close_file",
    "exists",
    "is_empty",
    "join_path",
    "open_file",
    "read_file",
    "remove",
    "write",
]
