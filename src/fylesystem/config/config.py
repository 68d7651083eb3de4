"""Configuration management for fylesystem."""

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from fylesystem.config.file_ops import write_text_file
from fylesystem.config.paths import default_config_path, resolve_overridable_path
from fylesystem.platform.logging import logger, setup_logger

ENCODING_DEFAULT = "utf-8"
JSON_INDENT_DEFAULT = 2

_CONFIG_KEYS = ("encoding", "json_indent", "json_ensure_ascii", "log_file")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Package configuration."""

    # Text encoding used for every file the package opens
    encoding: str = ENCODING_DEFAULT

    # JSON output settings
    json_indent: int = JSON_INDENT_DEFAULT
    json_ensure_ascii: bool = False

    # Rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths flagged with ``metadata={"path": True}`` to ``Path``.

        Empty strings mean "not set" and become ``None``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def configure_logging(self) -> logging.Logger:
        """Apply ``log_file`` to the package logger and return it."""

        return setup_logger(log_file=self.log_file)

    def save(self, path: Path | str | None = None) -> Path:
        """Save configuration to file and return the written path."""
        config_dict = asdict(self)

        try:
            target = resolve_overridable_path(
                explicit_path=path, default_factory=default_config_path
            )
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# fylesystem Configuration File")
        lines.append("")

        lines.append("# Text encoding for files created, read and appended to")
        lines.append(f"encoding = {self._format_toml_value(config['encoding'])}")
        lines.append("")

        lines.append("# Number of spaces used to indent JSON files (default 2)")
        lines.append(f"json_indent = {self._format_toml_value(config['json_indent'])}")
        lines.append("")

        lines.append("# Escape non-ASCII characters in JSON output (default false)")
        lines.append(
            f"json_ensure_ascii = {self._format_toml_value(config['json_ensure_ascii'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/fylesystem.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Path):
            return f'"{value.as_posix()}"'
        if isinstance(value, str):
            return f'"{value}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Optional explicit config file. Defaults to the portable
                ``config/fylesystem.toml`` under the repository root.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        if cls._instance is not None and path is None:
            return cls._instance

        config_file = resolve_overridable_path(
            explicit_path=path, default_factory=default_config_path
        )

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {
                    key: config_dict[key] for key in _CONFIG_KEYS if key in config_dict
                }
                unknown = sorted(set(config_dict) - set(known))
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**known)
            else:
                logger.debug("No configuration at %s, using defaults", config_file)
                instance = cls()

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        if path is None:
            cls._instance = instance
        return instance


# Global configuration instance
config = Config.load()
_ = config.configure_logging()
