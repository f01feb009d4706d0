"""Configuration for svg-analyze.

Settings come from a YAML file (explicit path, ``$SVG_ANALYZE_CONFIG``, or
``~/.config/svg-analyze/config.yaml``) layered over built-in defaults.
Keys may be flat or grouped under ``thresholds:`` / ``settings:``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from svg_analyze.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SVG_ANALYZE_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/svg-analyze/config.yaml")

_SECTIONS = ("thresholds", "settings")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Assessment thresholds and runtime options."""

    # Off-center limit, as a fraction of the viewBox dimension.
    center_threshold: float = 0.05
    # Padding percentages.
    max_padding: float = 20.0
    uneven_padding: float = 10.0
    # Suggested viewBox: padding fraction per side and square-ify window.
    target_padding: float = 0.05
    square_tolerance: float = 0.1
    jobs: int = 1
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not 0 <= self.target_padding < 0.5:
            raise ConfigError(f"target_padding must be in [0, 0.5), got {self.target_padding}")
        if self.jobs < 1:
            raise ConfigError(f"jobs must be at least 1, got {self.jobs}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"unknown log_level: {self.log_level}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from a (possibly sectioned) mapping."""
        flat: dict[str, Any] = {}
        for key, value in data.items():
            if key in _SECTIONS:
                if not isinstance(value, dict):
                    raise ConfigError(f"'{key}' must be a mapping")
                flat.update(value)
            else:
                flat[key] = value

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(flat) - set(known))
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, value in flat.items():
            default = getattr(cls, key)
            if isinstance(default, bool) or isinstance(value, bool):
                raise ConfigError(f"'{key}' has invalid value {value!r}")
            if isinstance(default, float) and isinstance(value, (int, float)):
                values[key] = float(value)
            elif isinstance(value, type(default)):
                values[key] = value
            else:
                raise ConfigError(
                    f"'{key}' must be {type(default).__name__}, got {type(value).__name__}"
                )
        return cls(**values)

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration, falling back to defaults when no file exists.

        An explicitly given path (argument or environment variable) must
        exist; the per-user default file is optional.
        """
        explicit = path or os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            config_path = Path(explicit).expanduser()
            if not config_path.is_file():
                raise ConfigError("config file not found", config_path)
        else:
            config_path = DEFAULT_CONFIG_PATH.expanduser()
            if not config_path.is_file():
                return cls()

        logger.debug("Loading config from %s", config_path)
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", config_path) from e
        except OSError as e:
            raise ConfigError(f"cannot read config: {e}", config_path) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("config root must be a mapping", config_path)
        try:
            return cls.from_dict(data)
        except ConfigError as e:
            raise ConfigError(e.message, config_path) from e

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a copy with non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
