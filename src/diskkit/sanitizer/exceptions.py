"""Exceptions for the sanitizer module.

This module defines exceptions raised while building or extending a
disposition table. Sanitizing itself only ever raises InputInvalidError.
"""

from diskkit.exceptions import ConfigurationError

__all__ = ["DispositionTableError"]


class DispositionTableError(ConfigurationError):
    """Raised when a disposition table rule is malformed or contradictory."""

    pass
