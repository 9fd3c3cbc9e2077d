"""NPM ecosystem helpers."""

from .specifier import (
    NAME_PATTERN,
    STRICT_NAME_PATTERN,
    resolve_version,
    split_specifier,
)

__all__ = ["NAME_PATTERN", "STRICT_NAME_PATTERN", "resolve_version", "split_specifier"]
