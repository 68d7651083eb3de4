"""
Summary: Create, read, check and remove ``.json`` files beside other generated files.
Why: Share one suffix rule and one error taxonomy across every JSON helper.
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

from fylesystem.config.settings import (
    ENCODING,
    JSON_ENSURE_ASCII,
    JSON_EXTENSION,
    JSON_INDENT,
)
from fylesystem.platform.logging import logger

from .errors import FileIOError, SerializationError
from .files import exists, join_path, remove

T = TypeVar("T")


def add_json_extension(name: str) -> str:
    """Return ``name`` with the literal ``.json`` suffix appended."""

    return name + JSON_EXTENSION


def json_path(directory: Path | str, name: str) -> Path:
    """Return the path of the JSON file ``name`` inside ``directory``."""

    return join_path(directory, add_json_extension(name))


def _to_serializable(data: Any) -> Any:
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    return data


def create_json_file(data: Any, directory: Path | str, name: str) -> Path:
    """Serialize ``data`` as indented JSON into ``directory/name.json``.

    Dataclass instances are converted with ``dataclasses.asdict``. An
    existing file is overwritten.

    Returns:
        Path: The written file.

    Raises:
        SerializationError: ``data`` cannot be encoded as JSON.
        FileIOError: The file cannot be created or written.
    """

    path = json_path(directory, name)
    try:
        payload = json.dumps(
            _to_serializable(data), indent=JSON_INDENT, ensure_ascii=JSON_ENSURE_ASCII
        )
    except (TypeError, ValueError) as exc:
        logger.error("Failed to encode JSON for %s: %s", path, exc)
        raise SerializationError(f"error marshalling to JSON: {exc}", path=path) from exc

    try:
        with open(path, "w", encoding=ENCODING, newline="") as handle:
            _ = handle.write(payload)
    except OSError as exc:
        logger.error("Failed to write JSON file %s: %s", path, exc)
        raise FileIOError(f"error writing JSON file {path}: {exc}", path=path) from exc

    logger.info(
        "Wrote JSON file %s",
        path,
        extra={"file_event": "json.write", "path": path},
    )
    return path


@overload
def read_json_file(directory: Path | str, name: str) -> Any: ...


@overload
def read_json_file(directory: Path | str, name: str, target: type[T]) -> T: ...


def read_json_file(
    directory: Path | str, name: str, target: type[Any] | None = None
) -> Any:
    """Read ``directory/name.json`` and decode it.

    Args:
        directory: Folder holding the file.
        name: File name without the ``.json`` suffix.
        target: Optional type the decoded value is validated into, such as a
            dataclass with nested dataclass or tuple fields.

    Returns:
        The decoded JSON value, or an instance of ``target``.

    Raises:
        FileIOError: The file is missing or unreadable.
        SerializationError: The content is not valid JSON, or does not
            validate as ``target``.
    """

    path = json_path(directory, name)
    try:
        text = path.read_text(encoding=ENCODING)
    except OSError as exc:
        raise FileIOError(f"error opening JSON file {path}: {exc}", path=path) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Failed to decode JSON file %s: %s", path, exc)
        raise SerializationError(f"error unmarshaling JSON: {exc}", path=path) from exc

    logger.debug("Read JSON file %s", path, extra={"file_event": "json.read", "path": path})

    if target is None:
        return data

    try:
        return TypeAdapter(target).validate_python(data)
    except ValidationError as exc:
        logger.error("Failed to decode JSON file %s into %s: %s", path, target, exc)
        raise SerializationError(
            f"error unmarshaling JSON into {getattr(target, '__name__', target)}: {exc}",
            path=path,
        ) from exc


def check_json_file(directory: Path | str, name: str) -> bool:
    """Return whether ``directory/name.json`` exists."""

    return exists(json_path(directory, name))


def remove_json_file(directory: Path | str, name: str) -> bool:
    """Delete ``directory/name.json`` if present.

    Returns:
        bool: ``True`` when a file was removed, ``False`` if none existed.

    Raises:
        FileIOError: The file exists but could not be removed.
    """

    if not check_json_file(directory, name):
        return False

    remove(json_path(directory, name))
    return True


__all__ = [
    "add_json_extension",
    "check_json_file",
    "create_json_file",
    "json_path",
    "read_json_file",
    "remove_json_file",
]
