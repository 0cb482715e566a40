"""Disposition rules for basename sanitization.

Every code point resolves to exactly one Disposition. A DispositionTable
holds literal rules keyed by a single character and class rules keyed by a
CodePointClass. Lookup order is: literal rule, whitespace class, control
class, then pass-through.

Tables are immutable. Use DispositionTable.with_rules() to derive a new
table with extra or overriding rules.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from diskkit.sanitizer.exceptions import DispositionTableError

__all__ = [
    "Disposition",
    "CodePointClass",
    "DispositionTable",
    "is_whitespace",
    "DEFAULT_TABLE",
    "HARDENED_TABLE",
    "DISALLOWED_CHARACTERS",
    "QUOTE_CHARACTERS",
]

# Replaced by a single space.
DISALLOWED_CHARACTERS = ".,;:*?|_<>/\\"

# Removed without leaving a gap.
QUOTE_CHARACTERS = "\"'“”‘’«»"


class Disposition(str, Enum):
    """Action applied to a code point during sanitization.

    Attributes:
        replace_with_space: The character becomes a single space.
        strip: The character is removed with no replacement.
        pass_through: The character is kept as is.
    """

    replace_with_space = "replace_with_space"
    strip = "strip"
    pass_through = "pass_through"


def is_whitespace(char: str) -> bool:
    """Return True for whitespace code points, including U+FEFF."""
    return char.isspace() or char == "\ufeff"


class CodePointClass(str, Enum):
    """Named groups of code points that share one rule.

    Attributes:
        whitespace: Any whitespace code point (space, tab, newline, NBSP...).
        control: Control characters (category Cc) that are not whitespace.
    """

    whitespace = "whitespace"
    control = "control"

    def matches(self, char: str) -> bool:
        if self is CodePointClass.whitespace:
            return is_whitespace(char)
        return unicodedata.category(char) == "Cc" and not is_whitespace(char)


# Evaluation order for class rules.
_CLASS_ORDER = (CodePointClass.whitespace, CodePointClass.control)


def _coerce_disposition(value: Any) -> Disposition:
    try:
        return Disposition(value)
    except ValueError:
        raise DispositionTableError(
            f"Unknown disposition {value!r}; expected one of "
            f"{', '.join(d.value for d in Disposition)}"
        ) from None


def _coerce_class(value: Any) -> CodePointClass:
    try:
        return CodePointClass(value)
    except ValueError:
        raise DispositionTableError(
            f"Unknown code point class {value!r}; expected one of "
            f"{', '.join(c.value for c in CodePointClass)}"
        ) from None


@dataclass(frozen=True)
class DispositionTable:
    """Immutable mapping from code points to dispositions.

    An empty table only replaces whitespace; everything else passes through.

    Attributes:
        characters: Literal rules, keyed by a single code point.
        classes: Class rules, keyed by CodePointClass.

    Raises:
        DispositionTableError: If a key is not a single code point, a value
            is not a known disposition, or the rules would leave whitespace
            in the output (whitespace set to pass_through, or the space
            character not resolving to replace_with_space).

    """

    characters: Mapping[str, Disposition] = field(default_factory=dict)
    classes: Mapping[CodePointClass, Disposition] = field(
        default_factory=lambda: {CodePointClass.whitespace: Disposition.replace_with_space}
    )

    def __post_init__(self) -> None:
        characters: dict[str, Disposition] = {}
        for char, disposition in self.characters.items():
            if not isinstance(char, str) or len(char) != 1:
                raise DispositionTableError(
                    f"Rule key must be a single code point, got {char!r}"
                )
            characters[char] = _coerce_disposition(disposition)

        classes = {
            _coerce_class(name): _coerce_disposition(disposition)
            for name, disposition in self.classes.items()
        }

        if classes.get(CodePointClass.whitespace) is Disposition.pass_through:
            raise DispositionTableError("Whitespace cannot be passed through")
        for char, disposition in characters.items():
            if is_whitespace(char) and disposition is Disposition.pass_through:
                raise DispositionTableError(
                    f"Whitespace character {char!r} cannot be passed through"
                )

        object.__setattr__(self, "characters", MappingProxyType(characters))
        object.__setattr__(self, "classes", MappingProxyType(classes))

        if self.disposition_for(" ") is not Disposition.replace_with_space:
            raise DispositionTableError(
                "The space character must resolve to replace_with_space"
            )

    def disposition_for(self, char: str) -> Disposition:
        """Resolve the disposition of a single code point.

        Args:
            char: A one-character string.

        Returns:
            The literal rule for char if any, else the first matching class
            rule, else Disposition.pass_through.

        """
        disposition = self.characters.get(char)
        if disposition is not None:
            return disposition
        for code_point_class in _CLASS_ORDER:
            class_disposition = self.classes.get(code_point_class)
            if class_disposition is not None and code_point_class.matches(char):
                return class_disposition
        return Disposition.pass_through

    def with_rules(
        self,
        *,
        replace: Iterable[str] = (),
        strip: Iterable[str] = (),
        pass_through: Iterable[str] = (),
        classes: Mapping[CodePointClass | str, Disposition | str] | None = None,
    ) -> DispositionTable:
        """Derive a new table with additional or overriding rules.

        Args:
            replace: Characters to replace with a space.
            strip: Characters to remove.
            pass_through: Characters to keep, overriding earlier rules.
            classes: Class rules to add or override.

        Returns:
            A new DispositionTable; this table is left unchanged.

        Raises:
            DispositionTableError: If a character appears in more than one
                group, or the resulting table is invalid.

        """
        overrides: dict[str, Disposition] = {}
        groups = (
            (Disposition.replace_with_space, replace),
            (Disposition.strip, strip),
            (Disposition.pass_through, pass_through),
        )
        for disposition, chars in groups:
            for char in chars:
                previous = overrides.get(char)
                if previous is not None and previous is not disposition:
                    raise DispositionTableError(
                        f"Character {char!r} given both {previous.value} "
                        f"and {disposition.value}"
                    )
                overrides[char] = disposition

        merged_classes: dict[Any, Any] = dict(self.classes)
        for name, disposition in (classes or {}).items():
            merged_classes[_coerce_class(name)] = disposition

        return DispositionTable(
            characters={**self.characters, **overrides},
            classes=merged_classes,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the table to plain JSON-compatible data."""
        grouped: dict[str, list[str]] = {d.value: [] for d in Disposition}
        for char, disposition in self.characters.items():
            grouped[disposition.value].append(char)
        return {
            "characters": grouped,
            "classes": {c.value: d.value for c, d in self.classes.items()},
        }


DEFAULT_TABLE = DispositionTable().with_rules(
    replace=DISALLOWED_CHARACTERS,
    strip=QUOTE_CHARACTERS,
)

HARDENED_TABLE = DEFAULT_TABLE.with_rules(
    classes={CodePointClass.control: Disposition.replace_with_space},
)
