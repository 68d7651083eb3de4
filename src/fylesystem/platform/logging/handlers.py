"""Rich console handler used by the package logger.

Where: platform/logging/handlers.py
What: Render structured ``file.*`` and ``json.*`` events with compact, styled paths.
Why: Keep console output readable when long output directories are involved.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that displays file paths in white with coloured separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "file.open": ("📂", "cyan", "Opened "),
        "file.write": ("✏️", "blue", "Appended to "),
        "file.remove": ("🗑️", "yellow", "Removed "),
        "file.build": ("🛠️", "green", "Built "),
        "file.error": ("⛔", "red", "Failed "),
        "json.write": ("💾", "green", "Wrote JSON "),
        "json.read": ("📖", "cyan", "Read JSON "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with coloured separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if separator == "\\" else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_file_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured file events with dedicated styling."""

        event = getattr(record, "file_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        path = getattr(record, "path", None)
        if path:
            _ = body.append_text(
                self._format_path(str(path), base=getattr(record, "base_path", None))
            )

        details: list[str] = []
        directive_count = getattr(record, "directive_count", None)
        if isinstance(directive_count, int):
            details.append(f"directives={directive_count}")
        size = getattr(record, "size", None)
        if isinstance(size, int):
            details.append(f"{size} chars")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for file events."""

        event_text = self._render_file_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
