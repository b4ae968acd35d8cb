"""Exceptions raised inside claw-deps."""


class ClawDepsError(Exception):
    """Base class for claw-deps errors."""

    pass


class ConfigError(ClawDepsError):
    """Raised when a config value cannot be used."""

    pass
