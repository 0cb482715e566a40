"""Base exceptions for diskkit.

This module defines the root exception hierarchy for the whole package.
All domain-specific exceptions inherit from DiskKitError.
"""

__all__ = ["DiskKitError", "InputInvalidError", "ConfigurationError"]


class DiskKitError(Exception):
    """Base exception for all diskkit errors.

    Provides a common exception type for clients to catch package errors.
    """

    pass


class InputInvalidError(DiskKitError):
    """Raised when a required argument is missing or has the wrong type.

    This is a contract violation by the caller. It is raised before any
    work is done and is never coerced into a default value.

    Attributes:
        argument: Name of the offending argument.
        reason: Why the argument was rejected.

    """

    def __init__(self, argument: str, reason: str) -> None:
        """Initialize InputInvalidError.

        Args:
            argument: Name of the offending argument.
            reason: Why the argument was rejected.

        """
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid input for '{argument}': {reason}")


class ConfigurationError(DiskKitError):
    """Base exception for configuration-related errors."""

    pass
