"""Helpers for writing directive-based text files and JSON files."""

from fylesystem.core import (
    Directive,
    FileIOError,
    FileSpec,
    FilesystemError,
    SerializationError,
    add_directive,
    add_directives,
    add_json_extension,
    build_file,
    check_json_file,
    close_file,
    create_json_file,
    exists,
    get_indent,
    is_empty,
    join_path,
    json_path,
    open_file,
    read_file,
    read_json_file,
    remove,
    remove_json_file,
    render_directive,
    render_directives,
    write,
)

__version__ = "0.1.0"

__all__ = [
    "Directive",
    "FileIOError",
    "FileSpec",
    "FilesystemError",
    "SerializationError",
    "add_directive",
    "add_directives",
    "add_json_extension",
    "build_file",
    "check_json_file",
    "close_file",
    "create_json_file",
    "exists",
    "get_indent",
    "is_empty",
    "join_path",
    "json_path",
    "open_file",
    "read_file",
    "read_json_file",
    "remove",
    "remove_json_file",
    "render_directive",
    "render_directives",
    "write",
]
