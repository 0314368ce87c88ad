"""Configuration for the tree demonstration driver.

Settings come from three layers, later layers winning: the defaults baked into
:class:`DemoConfig`, an optional JSON or YAML file, and explicit command line
overrides applied through :meth:`DemoConfig.merged`.

Example YAML file::

    sample_size: 12
    upper_bound: 50
    extra_keys: [60, 70, 80]
    seed: 7
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 10
DEFAULT_UPPER_BOUND = 100
DEFAULT_EXTRA_KEYS: Tuple[int, ...] = (110, 120, 130)

_SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


class ConfigError(ValueError):
    """Raised when a demo configuration file cannot be used."""


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Parameters of a demonstration run."""

    sample_size: int = DEFAULT_SAMPLE_SIZE
    upper_bound: int = DEFAULT_UPPER_BOUND
    extra_keys: Tuple[int, ...] = DEFAULT_EXTRA_KEYS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("sample_size", "upper_bound"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer")
        if self.sample_size > self.upper_bound:
            raise ConfigError("sample_size cannot exceed upper_bound")
        if self.seed is not None and (
            not isinstance(self.seed, int) or isinstance(self.seed, bool)
        ):
            raise ConfigError("seed must be an integer or null")
        if not isinstance(self.extra_keys, tuple) or not all(
            isinstance(key, int) and not isinstance(key, bool) for key in self.extra_keys
        ):
            raise ConfigError("extra_keys must be a sequence of integers")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "DemoConfig":
        """Create a config from a parsed mapping, rejecting unknown keys."""

        if not isinstance(payload, Mapping):
            raise ConfigError("Configuration must be a mapping")
        if not all(isinstance(key, str) for key in payload):
            raise ConfigError("Configuration keys must be strings")
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = dict(payload)
        if "extra_keys" in values:
            extra = values["extra_keys"]
            if not isinstance(extra, (list, tuple)):
                raise ConfigError("extra_keys must be a sequence of integers")
            values["extra_keys"] = tuple(extra)
        return cls(**values)

    def merged(self, **overrides: Any) -> "DemoConfig":
        """Return a copy with every non-``None`` override applied."""

        changes = {name: value for name, value in overrides.items() if value is not None}
        if "extra_keys" in changes:
            changes["extra_keys"] = tuple(changes["extra_keys"])
        return replace(self, **changes)


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def load_demo_config(path: Optional[Path | str]) -> DemoConfig:
    """Load a :class:`DemoConfig` from *path*, or return defaults for ``None``."""

    if path is None:
        return DemoConfig()

    config_path = Path(path)
    if config_path.suffix.lower() not in _SUPPORTED_SUFFIXES:
        raise ConfigError(
            f"Unsupported configuration format {config_path.suffix!r};"
            f" expected one of {', '.join(_SUPPORTED_SUFFIXES)}"
        )
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    payload = _parse(config_path, config_path.read_text(encoding="utf-8"))
    if payload is None:
        payload = {}
    config = DemoConfig.from_mapping(payload)
    logger.debug("Loaded demo configuration from %s: %s", config_path, config)
    return config


__all__ = [
    "ConfigError",
    "DEFAULT_EXTRA_KEYS",
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_UPPER_BOUND",
    "DemoConfig",
    "load_demo_config",
]
