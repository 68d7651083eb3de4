"""Where: src/fylesystem/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the core modules without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

import codecs

from fylesystem.config.config import (
    ENCODING_DEFAULT,
    JSON_INDENT_DEFAULT,
    config as app_config,
)

# Text files ------------------------------------------------------------------

_encoding = getattr(app_config, "encoding", ENCODING_DEFAULT) or ENCODING_DEFAULT
try:
    ENCODING: str = codecs.lookup(_encoding).name
except (LookupError, TypeError):
    ENCODING = ENCODING_DEFAULT

# Directive rendering always uses plain spaces and a bare line feed so the
# generated text is identical on every platform.
INDENT_CHARACTER: str = " "
LINE_BREAK: str = "\n"


# JSON files ------------------------------------------------------------------

JSON_EXTENSION: str = ".json"

_json_indent = getattr(app_config, "json_indent", JSON_INDENT_DEFAULT)
JSON_INDENT: int = (
    _json_indent
    if isinstance(_json_indent, int) and not isinstance(_json_indent, bool) and _json_indent >= 0
    else JSON_INDENT_DEFAULT
)

JSON_ENSURE_ASCII: bool = bool(getattr(app_config, "json_ensure_ascii", False))


__all__ = [
    "ENCODING",
    "INDENT_CHARACTER",
    "LINE_BREAK",
    "JSON_EXTENSION",
    "JSON_INDENT",
    "JSON_ENSURE_ASCII",
]
