"""
System configuration.

One optional YAML file configures the whole library:

    logging:
      level: DEBUG
      format: json
    indicators:
      lengths:
        fast_stochastic: 21
        rate_of_change: ${ROC_LENGTH}

Lookup order for load() without an explicit path:
1. $TICKWINDOW_CONFIG
2. config/tickwindow.yaml (relative to the working directory)
3. Built-in defaults (no file required)

``${VAR}`` placeholders are replaced from the environment; undefined
variables are left untouched. File values are deep-merged over defaults.
The cached config (get_system_config) also configures logging from its
``logging`` section.
"""

import os
import re
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, Field, PositiveInt, ValidationError

from tickwindow.errors import ConfigError
from tickwindow.system.log_system import LoggerFactory, LoggingConfig

logger = structlog.get_logger(__name__)

CONFIG_ENV_VAR = "TICKWINDOW_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/tickwindow.yaml")

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class IndicatorDefaults(BaseModel):
    """
    Default window lengths used by the registry.

    Keys are registry names ("minimum", "fast_stochastic", ...). Indicators
    without an entry fall back to their class ``default_length``.
    """

    lengths: dict[str, PositiveInt] = Field(
        default_factory=dict,
        description="Default window length per registry name",
    )

    def length_for(self, name: str, fallback: int) -> int:
        """Configured length for ``name`` or ``fallback``."""
        return self.lengths.get(name, fallback)


class SystemConfig(BaseModel):
    """Complete tickwindow configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    indicators: IndicatorDefaults = Field(default_factory=IndicatorDefaults)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "SystemConfig":
        """
        Load configuration from YAML, falling back to defaults.

        Args:
            path: Config file. If None, $TICKWINDOW_CONFIG or config/tickwindow.yaml.

        Returns:
            SystemConfig instance

        Raises:
            ConfigError: If the file is not valid YAML or fails validation
        """
        if path is None:
            path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        path = Path(path)

        if not path.is_file():
            logger.debug("config.defaults", path=str(path))
            return cls()

        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config root in {path} must be a mapping, got {type(raw).__name__}")

        config = cls._from_dict(_substitute_env_vars(raw))
        logger.debug("config.loaded", path=str(path))
        return config

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "SystemConfig":
        """Build config from a (partial) dict merged over defaults."""
        merged = _deep_merge(cls().model_dump(), data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``; override wins."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _substitute_env_vars(value: Any) -> Any:
    """Replace ${VAR} in strings nested in dicts/lists; unknown vars are kept."""
    if isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env_vars(v) for v in value]
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)
    return value


_system_config: SystemConfig | None = None


def get_system_config(path: Path | str | None = None) -> SystemConfig:
    """
    Get the cached system config, loading it on first use.

    Loading also applies its ``logging`` section via LoggerFactory.configure().

    Args:
        path: Explicit config file; loads and caches it, replacing any cached config

    Returns:
        SystemConfig singleton
    """
    if path is not None or _system_config is None:
        return reload_system_config(path)
    return _system_config


def reload_system_config(path: Path | str | None = None) -> SystemConfig:
    """Force reload of the cached system config and reapply its logging section."""
    global _system_config
    _system_config = SystemConfig.load(path)
    LoggerFactory.configure(_system_config.logging)
    return _system_config
