"""Configuration management for filemisc."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from filemisc.config.paths import default_config_path
from filemisc.platform.filesystem import ensure_parent_directory
from filemisc.platform.logging import logger

LOG_LEVEL_DEFAULT: Final[str] = "INFO"
COPY_CHUNK_SIZE_DEFAULT: Final[int] = 1024 * 1024


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
    """Runtime configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Console log level name
    log_level: str = LOG_LEVEL_DEFAULT

    # Buffer size used when streaming file contents
    copy_chunk_size: int = COPY_CHUNK_SIZE_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @property
    def log_level_number(self) -> int:
        """Return ``log_level`` as a ``logging`` constant, INFO when unknown."""
        raw_level: object = self.log_level
        if not isinstance(raw_level, str):
            return logging.INFO
        level = logging.getLevelName(raw_level.upper())
        return level if isinstance(level, int) else logging.INFO

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Target file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            _ = ensure_parent_directory(target)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# filemisc configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/filemisc.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING or ERROR")
        lines.append(f"log_level = {self._format_toml_value(config['log_level'])}")
        lines.append("")

        lines.append("# Buffer size in bytes used by concat")
        lines.append(f"copy_chunk_size = {self._format_toml_value(config['copy_chunk_size'])}")
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
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            path: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and path in (None, cls._loaded_from):
            return cls._instance

        config_file = path or default_config_path()

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["COPY_CHUNK_SIZE_DEFAULT", "Config", "LOG_LEVEL_DEFAULT"]
