"""Utility helpers for unpkgify."""

from .exceptions import ConfigNotFoundError, ConfigurationError, InvalidConfigError

__all__ = ["ConfigurationError", "ConfigNotFoundError", "InvalidConfigError"]
