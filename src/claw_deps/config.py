"""User configuration.

Read from ~/.config/claw-deps/config.toml when present.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# tomllib is stdlib in 3.11+, use tomli as fallback for 3.10
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found,no-redef]

from claw_deps.errors import ConfigError
from claw_deps.runner import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "claw-deps"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _validate_timeout(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"timeout must be a positive integer, got {value!r}")
    return value


def _validate_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return value.upper()


@dataclass
class Config:
    """User configuration settings."""

    timeout: int = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    # File path for this config (not persisted)
    _path: Path = field(default=DEFAULT_CONFIG_PATH, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> Config:
        """Create config from a dictionary, keeping defaults for bad values."""
        config = cls(_path=path or DEFAULT_CONFIG_PATH)
        validators = {"timeout": _validate_timeout, "log_level": _validate_log_level}
        for key, validate in validators.items():
            if key not in data:
                continue
            try:
                setattr(config, key, validate(data[key]))
            except ConfigError as e:
                logger.warning("Ignoring %s in config: %s", key, e)
        return config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        path: Optional custom config path. Defaults to ~/.config/claw-deps/config.toml

    Returns:
        Config object with loaded or default settings.
    """
    config_path = path or DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return Config(_path=config_path)

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return Config.from_dict(data, path=config_path)
    except (tomllib.TOMLDecodeError, OSError) as e:
        print(f"Warning: Could not load config from {config_path}: {e}", file=sys.stderr)
        return Config(_path=config_path)
