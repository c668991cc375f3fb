"""Validation utilities for pychemgen configuration."""

from .errors import ConfigError, UnknownConfigKeyError

__all__ = [
    "ConfigError",
    "UnknownConfigKeyError"
]
