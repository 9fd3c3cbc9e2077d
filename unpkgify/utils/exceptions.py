"""
Exception handling for configuration loading.

Conversion itself never fails: unrecognised text passes through unchanged.
The only errors the tool reports come from reading and validating its
configuration. Each exception includes:
- Clear error message
- The configuration source involved
- Suggested user action
"""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Base exception for all configuration-related errors.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        suggested_action: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Human-readable error message
            source: Path of the configuration file involved
            suggested_action: Suggested action for the user to resolve the issue
            original_exception: The original exception that was caught
        """
        self.message = message
        self.source = source
        self.suggested_action = suggested_action
        self.original_exception = original_exception

        error_parts = [message]

        if source:
            error_parts.append(f"Source: {source}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ConfigNotFoundError(ConfigurationError):
    """
    Raised when a configuration file passed explicitly does not exist.
    """

    def __init__(self, source: str):
        super().__init__(
            message="Config file not found",
            source=source,
            suggested_action="Check the --config path or omit it to use the defaults",
        )


class InvalidConfigError(ConfigurationError):
    """
    Raised when a configuration file cannot be parsed or fails validation.

    The individual validation messages are kept on ``errors``.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        errors: Optional[List[str]] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.errors = list(errors or [])

        if self.errors:
            message = f"{message}: " + "; ".join(self.errors)

        super().__init__(
            message=message,
            source=source,
            suggested_action="Fix the listed configuration values",
            original_exception=original_exception,
        )


__all__ = [
    "ConfigurationError",
    "ConfigNotFoundError",
    "InvalidConfigError",
]
