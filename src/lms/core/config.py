"""Registry configuration.

The defaults describe the standard load format
``<7-digit-id>-<name>-<address>-<fine>`` with fines capped at 250.
A YAML file may override any of them::

    id_length: 7
    fine_min: 0
    fine_max: 250
    delimiter: "-"
    encoding: utf-8
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from lms.core.errors import ConfigError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class RegistryConfig:
    """Validation and parsing settings for a :class:`PatronRegistry`.

    Parameters
    ----------
    id_length:
        Exact number of ASCII digits in a patron ID.
    fine_min:
        Smallest allowed fine (inclusive).
    fine_max:
        Largest allowed fine (inclusive).
    delimiter:
        Literal field separator on load lines.
    field_count:
        Number of fields every load line must split into.
    encoding:
        Text encoding of load files.
    """

    id_length: int = 7
    fine_min: float = 0.0
    fine_max: float = 250.0
    delimiter: str = "-"
    field_count: int = 4
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not _is_int(self.id_length):
            raise ConfigError(f"id_length must be an integer, got {self.id_length!r}")
        for name in ("fine_min", "fine_max"):
            value = getattr(self, name)
            if not (_is_int(value) or isinstance(value, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
        for name in ("delimiter", "encoding"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if self.id_length < 1:
            raise ConfigError(f"id_length must be positive, got {self.id_length}")
        if self.fine_min > self.fine_max:
            raise ConfigError(
                f"fine_min ({self.fine_min}) must not exceed fine_max ({self.fine_max})"
            )
        if not self.delimiter:
            raise ConfigError("delimiter must not be empty")
        if self.field_count != 4:
            raise ConfigError(f"field_count must be 4, got {self.field_count}")
        try:
            b"".decode(self.encoding)
        except LookupError as exc:
            raise ConfigError(
                f"encoding must name a text codec, got {self.encoding!r}"
            ) from exc

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "RegistryConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
        try:
            return cls(**data)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc

    @classmethod
    def from_yaml(cls, text: str) -> "RegistryConfig":
        """Parse a YAML document into a config."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML config: {exc}") from exc
        return cls.from_mapping(data)


def load_config(path: str | Path) -> RegistryConfig:
    """Read a YAML config file.

    Raises
    ------
    ConfigError
        If the file cannot be read or holds an invalid config.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    return RegistryConfig.from_yaml(text)
