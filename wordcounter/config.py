"""Configuration management for wordcounter."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import yaml

from .analyzers.text_analyzer import DEFAULT_TOP_N
from .exceptions import ConfigError


def get_default_config_path() -> Path:
    """Get the bundled config path (next to this file)."""
    return Path(__file__).parent / "config.yaml"


@dataclass
class ReportConfig:
    """Settings for the --stats report."""

    top_n: int = DEFAULT_TOP_N

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReportConfig":
        top_n = data.get("top_n", DEFAULT_TOP_N)
        # bool is an int subclass
        if not isinstance(top_n, int) or isinstance(top_n, bool) or top_n < 1:
            raise ConfigError(f"report.top_n must be a positive integer, got: {top_n!r}")
        return cls(top_n=top_n)


@dataclass
class InputConfig:
    """Settings for reading the input file."""

    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InputConfig":
        encoding = data.get("encoding", "utf-8")
        try:
            # Also rejects non-text codecs (rot13, base64, hex)
            "".encode(encoding)
        except (LookupError, TypeError):
            raise ConfigError(f"input.encoding is not a known text encoding: {encoding!r}")
        return cls(encoding=encoding)


@dataclass
class Config:
    """Main configuration for wordcounter."""

    report: ReportConfig = field(default_factory=ReportConfig)
    input: InputConfig = field(default_factory=InputConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        return cls(
            report=ReportConfig.from_dict(_section(data, "report")),
            input=InputConfig.from_dict(_section(data, "input")),
        )

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load configuration from a YAML file.

        Raises:
            ConfigError: If the file can't be read or holds invalid values
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config {path}: {e}") from e

        # Empty file
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        return cls.from_dict(data)


def load_config(path: Path | str | None = None) -> Config:
    """Load config from path, or the bundled config.yaml when path is None."""
    if path is None:
        path = get_default_config_path()
    return Config.load(Path(path).expanduser())


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return section
