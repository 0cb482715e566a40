"""Basename sanitizer.

Turns an arbitrary string into a value that is safe to use as a single
path component on common filesystems. The transformation runs four passes
over code points, each on the output of the previous one:

1. drop every character whose disposition is strip
2. replace every replace_with_space character with a space
3. collapse each run of whitespace into one space
4. trim the leading and trailing space

Strip and replace stay separate passes: stripping a quote must not leave a
gap, so '"alpha" bravo' becomes 'alpha bravo' and not 'alpha  bravo'.

The sanitizer is pure. It does no I/O, holds no mutable state, and can be
shared between threads.
"""

from __future__ import annotations

from typing import Any

from diskkit.exceptions import InputInvalidError
from diskkit.sanitizer.dispositions import (
    DEFAULT_TABLE,
    Disposition,
    DispositionTable,
    is_whitespace,
)

__all__ = ["BasenameSanitizer", "sanitize_basename"]


class BasenameSanitizer:
    """Sanitizes basenames according to a disposition table.

    Attributes:
        table: The read-only disposition table used for every call.

    Example:
        >>> BasenameSanitizer()("alpha.bravo")
        'alpha bravo'

    """

    def __init__(self, table: DispositionTable = DEFAULT_TABLE) -> None:
        """Initialize the sanitizer.

        Args:
            table: Disposition table; defaults to DEFAULT_TABLE.

        """
        self._table = table

    @property
    def table(self) -> DispositionTable:
        """Get the disposition table."""
        return self._table

    def sanitize(self, value: str) -> str:
        """Sanitize a basename.

        Args:
            value: The string to sanitize. May be empty.

        Returns:
            The sanitized string, with no stripped or replaced characters,
            no run of two spaces and no leading or trailing space.

        Raises:
            InputInvalidError: If value is not a str.

        """
        if not isinstance(value, str):
            raise InputInvalidError(
                "value", f"expected str, got {type(value).__name__}"
            )

        disposition_for = self._table.disposition_for

        stripped = "".join(
            char for char in value if disposition_for(char) is not Disposition.strip
        )
        replaced = "".join(
            " " if disposition_for(char) is Disposition.replace_with_space else char
            for char in stripped
        )
        return _collapse_whitespace(replaced).strip(" ")

    def __call__(self, value: str) -> str:
        return self.sanitize(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self._table!r})"


def _collapse_whitespace(text: str) -> str:
    pieces: list[str] = []
    in_run = False
    for char in text:
        if is_whitespace(char):
            if not in_run:
                pieces.append(" ")
            in_run = True
        else:
            pieces.append(char)
            in_run = False
    return "".join(pieces)


_DEFAULT_SANITIZER = BasenameSanitizer()


def sanitize_basename(value: Any, table: DispositionTable | None = None) -> str:
    """Sanitize a basename with the default or a supplied table.

    Args:
        value: The string to sanitize.
        table: Optional disposition table overriding DEFAULT_TABLE.

    Returns:
        The sanitized string.

    Raises:
        InputInvalidError: If value is not a str.

    """
    sanitizer = _DEFAULT_SANITIZER if table is None else BasenameSanitizer(table)
    return sanitizer.sanitize(value)
