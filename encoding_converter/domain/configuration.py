"""Domain models for configuration management."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict

from .formats import FormatId


CONFIG_VERSION = "1.0.0"


@dataclass(frozen=True)
class DefaultFormats:
    """Format pair used when the caller does not pick one."""

    source: FormatId = FormatId.TEXT
    target: FormatId = FormatId.BASE64


@dataclass(frozen=True)
class LoggingSettings:
    """Logger configuration for the converter."""

    level: int = logging.WARNING
    json_mode: bool = False


@dataclass(frozen=True)
class ExportOptions:
    """Where and how export files are written."""

    file_name: str = "encoding-conversion.txt"
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ConverterConfig:
    """Aggregated configuration for the converter front ends."""

    version: str = CONFIG_VERSION
    formats: DefaultFormats = field(default_factory=DefaultFormats)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    export: ExportOptions = field(default_factory=ExportOptions)

    def to_dict(self) -> Dict[str, object]:
        """Convert the configuration into a JSON serialisable structure."""
        return {
            "version": self.version,
            "formats": {
                "source": self.formats.source.value,
                "target": self.formats.target.value,
            },
            "logging": {
                "level": logging.getLevelName(self.logging.level),
                "json_mode": self.logging.json_mode,
            },
            "export": {
                "file_name": self.export.file_name,
                "encoding": self.export.encoding,
            },
        }


def parse_level(value: object) -> int:
    """Accept either a numeric level or a level name such as ``"debug"``."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level


def with_cli_overrides(base_config: ConverterConfig, overrides: Dict[str, object]) -> ConverterConfig:
    """Create a new configuration with CLI overrides applied.

    ``None`` values mean "not given on the command line" and keep the base value.
    """

    formats = base_config.formats
    if overrides.get("source") is not None or overrides.get("target") is not None:
        formats = DefaultFormats(
            source=overrides.get("source") or formats.source,  # type: ignore[arg-type]
            target=overrides.get("target") or formats.target,  # type: ignore[arg-type]
        )

    settings = base_config.logging
    if overrides.get("log_level") is not None or overrides.get("json_logs") is not None:
        level = overrides.get("log_level")
        json_logs = overrides.get("json_logs")
        settings = LoggingSettings(
            level=parse_level(level) if level is not None else settings.level,
            json_mode=bool(json_logs) if json_logs is not None else settings.json_mode,
        )

    return replace(base_config, formats=formats, logging=settings)
