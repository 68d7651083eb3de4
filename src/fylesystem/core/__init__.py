# Where: fylesystem.core.__init__
# What: Provide a concise import surface for the file, directive and JSON helpers.
# Why: Callers import from one place regardless of which module implements an operation.

"""File writer, directive composer and JSON helpers."""

from .directives import (
    Directive,
    FileSpec,
    add_directive,
    add_directives,
    build_file,
    get_indent,
    render_directive,
    render_directives,
)
from .errors import FileIOError, FilesystemError, SerializationError
from .files import (
    close_file,
    exists,
    is_empty,
    join_path,
    open_file,
    read_file,
    remove,
    write,
)
from .json_files import (
    add_json_extension,
    check_json_file,
    create_json_file,
    json_path,
    read_json_file,
    remove_json_file,
)

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
