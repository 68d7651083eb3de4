"""Tests for the basic text file wrappers."""

from __future__ import annotations

from pathlib import Path

import pytest

from fylesystem.core.errors import FileIOError
from fylesystem.core.files import (
    close_file,
    exists,
    is_empty,
    join_path,
    open_file,
    read_file,
    remove,
    write,
)


def test_join_path_places_name_inside_directory(tmp_path: Path) -> None:
    """The composed path is the directory joined with the file name."""

    assert join_path(tmp_path, "recipe.txt") == tmp_path / "recipe.txt"
    assert join_path(str(tmp_path), "recipe.txt") == tmp_path / "recipe.txt"


def test_open_file_creates_file(tmp_path: Path) -> None:
    """Opening a new name creates the file on disk."""

    handle = open_file("testfile.txt", tmp_path)
    try:
        assert (tmp_path / "testfile.txt").exists()
    finally:
        close_file(handle)


def test_open_file_truncates_existing_content(tmp_path: Path) -> None:
    """Opening an existing file discards its previous content."""

    target = tmp_path / "testfile.txt"
    _ = target.write_text("stale content", encoding="utf-8")

    with open_file("testfile.txt", tmp_path):
        pass

    assert target.read_text(encoding="utf-8") == ""


def test_open_file_in_missing_directory_raises(tmp_path: Path) -> None:
    """A missing directory surfaces as a FileIOError naming the path."""

    missing = tmp_path / "does-not-exist"

    with pytest.raises(FileIOError, match="failed to open file testfile.txt") as excinfo:
        _ = open_file("testfile.txt", missing)

    assert excinfo.value.path == missing / "testfile.txt"
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_write_then_read_returns_text(tmp_path: Path) -> None:
    """Text written through the handle is read back unchanged."""

    handle = open_file("testfile.txt", tmp_path)
    write(handle, "Hello, World!")
    close_file(handle)

    assert read_file(tmp_path / "testfile.txt") == "Hello, World!"


def test_write_appends_in_order(tmp_path: Path) -> None:
    """Successive writes are appended without any separator."""

    handle = open_file("testfile.txt", tmp_path)
    write(handle, "first")
    write(handle, "second\n")
    write(handle, "third")
    close_file(handle)

    assert read_file(tmp_path / "testfile.txt") == "firstsecond\nthird"


def test_write_keeps_line_feeds_verbatim(tmp_path: Path) -> None:
    """Line feeds are not translated to the platform line separator."""

    handle = open_file("testfile.txt", tmp_path)
    write(handle, "a\nb\n")
    close_file(handle)

    assert (tmp_path / "testfile.txt").read_bytes() == b"a\nb\n"


def test_write_to_closed_handle_raises(tmp_path: Path) -> None:
    """Writing after close is reported as an I/O error."""

    handle = open_file("testfile.txt", tmp_path)
    close_file(handle)

    with pytest.raises(FileIOError, match="failed to write file"):
        write(handle, "late")


def test_read_missing_file_raises(tmp_path: Path) -> None:
    """Reading a missing path raises a FileIOError wrapping FileNotFoundError."""

    missing = tmp_path / "missing.txt"

    with pytest.raises(FileIOError, match="failed to read file with path") as excinfo:
        _ = read_file(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_is_empty_tracks_writes(tmp_path: Path) -> None:
    """A fresh handle is empty and stops being empty after a write."""

    handle = open_file("testfile.txt", tmp_path)
    try:
        assert is_empty(handle) is True
        write(handle, "Hello")
        assert is_empty(handle) is False
    finally:
        close_file(handle)


def test_is_empty_on_closed_handle_raises(tmp_path: Path) -> None:
    """Stat failures are reported instead of being ignored."""

    handle = open_file("testfile.txt", tmp_path)
    close_file(handle)

    with pytest.raises(FileIOError, match="failed to check file info"):
        _ = is_empty(handle)


def test_close_file_twice_raises(tmp_path: Path) -> None:
    """Closing an already closed handle is an error."""

    handle = open_file("testfile.txt", tmp_path)
    close_file(handle)

    assert handle.closed
    with pytest.raises(FileIOError, match="already closed"):
        close_file(handle)


def test_exists_follows_open_and_remove(tmp_path: Path) -> None:
    """Existence is true after open and false after remove."""

    full_path = tmp_path / "testfile.txt"
    assert exists(full_path) is False

    close_file(open_file("testfile.txt", tmp_path))
    assert exists(full_path) is True

    remove(full_path)
    assert exists(full_path) is False


def test_exists_treats_stat_errors_as_missing() -> None:
    """Paths that cannot be stat-ed are reported as missing."""

    assert exists("bad\0path") is False


def test_remove_missing_file_raises(tmp_path: Path) -> None:
    """Removing a file twice fails the second time."""

    full_path = tmp_path / "testfile.txt"
    close_file(open_file("testfile.txt", tmp_path))

    remove(full_path)

    with pytest.raises(FileIOError, match="failed to remove file"):
        remove(full_path)
