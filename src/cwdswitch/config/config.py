"""Configuration management for cwdswitch."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from cwdswitch.config.file_ops import write_text_file
from cwdswitch.config.paths import default_config_path

logger = logging.getLogger(__name__)

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(ValueError):
    """Raised when the configuration file cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration in {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; None falls back to the portable default
    log_file: Path | None = _path_field()

    # Console log level name for the CLI
    console_level: str = "INFO"

    # Take the shared process lock around every directory change
    serialize_changes: bool = False

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.console_level = str(self.console_level).upper()

    @property
    def console_log_level(self) -> int:
        """Numeric logging level for ``console_level``."""
        return logging.getLevelNamesMapping()[self.console_level]

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# cwdswitch configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/cwdswitch.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING, ERROR or CRITICAL")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append("")

        lines.append("# Serialize directory changes behind a process-wide lock")
        lines.append(
            f"serialize_changes = {self._format_toml_value(config['serialize_changes'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def _validate(cls, config_file: Path, config_dict: dict[str, Any]) -> dict[str, Any]:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigError(config_file, f"unknown keys: {', '.join(unknown)}")

        log_file = config_dict.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(config_file, "log_file must be a string")

        level = config_dict.get("console_level", "INFO")
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            raise ConfigError(config_file, f"unsupported console_level {level!r}")

        serialize = config_dict.get("serialize_changes", False)
        if not isinstance(serialize, bool):
            raise ConfigError(config_file, "serialize_changes must be true or false")

        return config_dict

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields the defaults; nothing is written.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = Path(path) if path is not None else default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(config_file, str(e)) from e

            instance = cls(**cls._validate(config_file, config_dict))
            logger.debug("Configuration loaded from %s", config_file)

        if path is None:
            cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads from disk."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
