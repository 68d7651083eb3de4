"""
Summary: Render directives to text and append batches of them to open files.
Why: Keep the indentation, blank-line and final-newline rules in one place.
"""

# Where: src/fylesystem/core/directives.py
# What: Directive and FileSpec value objects plus the composer operations.
# Assumptions: - Handles come from ``open_file`` and are owned by the caller.
# Trade-offs: - Batches are not transactional; partial output stays on disk.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from fylesystem.config.settings import INDENT_CHARACTER, LINE_BREAK
from fylesystem.platform.logging import logger

from .errors import FileIOError
from .files import close_file, join_path, open_file, write


@dataclass(frozen=True, slots=True)
class Directive:
    """A single line of content with its indentation and blank-line prefix."""

    content: str
    indent: int = 0
    leading_blank_line: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"Directive indent must not be negative: {self.indent}")


@dataclass(frozen=True, slots=True)
class FileSpec:
    """Declarative description of a file built from directives in one call."""

    name: str
    directory: Path
    directives: tuple[Directive, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "directory", Path(self.directory))
        object.__setattr__(self, "directives", tuple(self.directives))

    @property
    def path(self) -> Path:
        """Target path of the described file."""

        return join_path(self.directory, self.name)


def get_indent(indent_count: int) -> str:
    """Return a string of ``indent_count`` spaces."""

    return INDENT_CHARACTER * indent_count


def render_directive(directive: Directive, is_last: bool) -> str:
    """Return the exact text appended for ``directive``.

    Every directive but the last of its batch ends with a line break. A
    leading blank line is placed before the indentation, so it produces a
    fully empty line above the content.
    """

    content = get_indent(directive.indent) + directive.content

    if not is_last:
        content += LINE_BREAK

    if directive.leading_blank_line:
        content = LINE_BREAK + content

    return content


def render_directives(directives: Sequence[Directive]) -> str:
    """Return the concatenated text of a whole batch."""

    last_index = len(directives) - 1
    return "".join(
        render_directive(directive, index == last_index)
        for index, directive in enumerate(directives)
    )


def add_directive(handle: TextIO, directive: Directive, is_last: bool) -> None:
    """Render ``directive`` and append it to ``handle``.

    Raises:
        FileIOError: The append failed; the message names the directive.
    """

    try:
        write(handle, render_directive(directive, is_last))
    except FileIOError as exc:
        raise FileIOError(
            f"failed to add directive {directive.content}: {exc}", path=exc.path
        ) from exc


def add_directives(handle: TextIO, directives: Sequence[Directive]) -> None:
    """Append ``directives`` in order, stopping at the first failed append."""

    last_index = len(directives) - 1
    for index, directive in enumerate(directives):
        add_directive(handle, directive, index == last_index)


def build_file(spec: FileSpec, close: bool = True) -> TextIO | None:
    """Create ``spec.path`` and write its directives.

    Args:
        spec: Name, directory and directives of the file to build.
        close: Close the handle once every directive is written.

    Returns:
        None when the file was closed, otherwise the open handle for further
        writes by the caller.

    Raises:
        FileIOError: Opening, appending or closing failed.

    Whatever goes wrong while the directives are written, the handle is
    closed before the error propagates; lines already written stay on disk.
    """

    handle = open_file(spec.name, spec.directory)

    try:
        add_directives(handle, spec.directives)
    except BaseException as exc:
        logger.error(
            "Failed to build %s: %s",
            spec.path,
            exc,
            extra={"file_event": "file.error", "path": spec.path, "error_message": str(exc)},
        )
        if not handle.closed:
            handle.close()
        raise

    logger.info(
        "Built %s with %d directives",
        spec.path,
        len(spec.directives),
        extra={
            "file_event": "file.build",
            "path": spec.path,
            "base_path": str(spec.directory),
            "directive_count": len(spec.directives),
        },
    )

    if close:
        close_file(handle)
        return None

    return handle


__all__ = [
    "Directive",
    "FileSpec",
    "add_directive",
    "add_directives",
    "build_file",
    "get_indent",
    "render_directive",
    "render_directives",
]
