"""Basename sanitizer package.

This package provides the disposition table model and the sanitizer that
applies it.
"""

from diskkit.sanitizer.basename import BasenameSanitizer, sanitize_basename
from diskkit.sanitizer.dispositions import (
    DEFAULT_TABLE,
    DISALLOWED_CHARACTERS,
    HARDENED_TABLE,
    QUOTE_CHARACTERS,
    CodePointClass,
    Disposition,
    DispositionTable,
    is_whitespace,
)
from diskkit.sanitizer.exceptions import DispositionTableError

__all__ = [
    "BasenameSanitizer",
    "CodePointClass",
    "DEFAULT_TABLE",
    "DISALLOWED_CHARACTERS",
    "Disposition",
    "DispositionTable",
    "DispositionTableError",
    "HARDENED_TABLE",
    "is_whitespace",
    "QUOTE_CHARACTERS",
    "sanitize_basename",
]
