"""Disposition table loader.

This module loads extra sanitizer rules from YAML files and composes
settings into a ready-to-use BasenameSanitizer.

Expected layout:

    sanitizer:
      replace: ["#", "%"]
      strip: ["`"]
      pass_through: ["_"]
      classes:
        control: replace_with_space
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from diskkit.config.defaults import SANITIZER_SECTION
from diskkit.config.settings import Settings, get_settings
from diskkit.logging_config import get_logger
from diskkit.sanitizer import (
    DEFAULT_TABLE,
    HARDENED_TABLE,
    BasenameSanitizer,
    CodePointClass,
    Disposition,
    DispositionTable,
    DispositionTableError,
)

__all__ = [
    "DispositionRules",
    "build_sanitizer",
    "load_disposition_table",
    "load_yaml_file",
]

logger = get_logger(__name__)


class DispositionRules(BaseModel):
    """Rules read from the sanitizer section of a YAML file.

    Attributes:
        replace: Characters to replace with a space.
        strip: Characters to remove.
        pass_through: Characters to keep unchanged.
        classes: Class rules, keyed by code point class name.

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    replace: list[str] = Field(default_factory=list)
    strip: list[str] = Field(default_factory=list)
    pass_through: list[str] = Field(default_factory=list)
    classes: dict[CodePointClass, Disposition] = Field(default_factory=dict)

    def apply(self, base: DispositionTable) -> DispositionTable:
        """Layer these rules over base and return the new table."""
        return base.with_rules(
            replace=self.replace,
            strip=self.strip,
            pass_through=self.pass_through,
            classes=self.classes,
        )


def load_yaml_file(path: Path, label: str = "File") -> dict[str, Any]:
    """Load and validate a YAML file, returning the parsed dict.

    Args:
        path: Path to the YAML file.
        label: Human-readable label for error messages.

    Returns:
        Parsed dictionary from the YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DispositionTableError: If the file cannot be read, is not valid
            YAML, is empty or is not a mapping.

    """
    if not path.exists():
        raise FileNotFoundError(f"{label} not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DispositionTableError(f"Failed to parse YAML file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DispositionTableError(f"Failed to read YAML file {path}: {e}") from e

    if data is None:
        raise DispositionTableError(f"Empty YAML file: {path}")

    if not isinstance(data, dict):
        raise DispositionTableError(
            f"Invalid YAML structure: expected mapping, got {type(data).__name__}"
        )

    return data


def load_disposition_table(
    path: Path | str, base: DispositionTable | None = None
) -> DispositionTable:
    """Load a disposition table from a YAML file.

    Rules from the file's sanitizer section are layered over base. A file
    without a sanitizer section yields base unchanged.

    Args:
        path: Path to the YAML file.
        base: Table to extend; defaults to DEFAULT_TABLE.

    Returns:
        The resulting DispositionTable.

    Raises:
        FileNotFoundError: If the file does not exist.
        DispositionTableError: If the rules are malformed.

    """
    path = Path(path)
    base = DEFAULT_TABLE if base is None else base
    data = load_yaml_file(path, label="Disposition table file")

    section = data.get(SANITIZER_SECTION)
    if section is None:
        return base

    if not isinstance(section, dict):
        raise DispositionTableError(
            f"Invalid '{SANITIZER_SECTION}' section: expected mapping in {path}"
        )

    try:
        rules = DispositionRules.model_validate(section)
    except ValidationError as e:
        raise DispositionTableError(f"Invalid disposition rules in {path}: {e}") from e

    table = rules.apply(base)
    logger.debug(
        "disposition_table_loaded",
        path=str(path),
        replace=len(rules.replace),
        strip=len(rules.strip),
        pass_through=len(rules.pass_through),
    )
    return table


def build_sanitizer(settings: Settings | None = None) -> BasenameSanitizer:
    """Build a sanitizer from settings.

    Args:
        settings: Settings to use; defaults to get_settings().

    Returns:
        A BasenameSanitizer using the hardened table when control
        characters are to be replaced, extended by the configured table
        file if any.

    """
    settings = settings or get_settings()
    sanitizer_settings = settings.sanitizer

    table = (
        HARDENED_TABLE
        if sanitizer_settings.replace_control_characters
        else DEFAULT_TABLE
    )
    if sanitizer_settings.table_file is not None:
        table = load_disposition_table(sanitizer_settings.table_file, base=table)

    return BasenameSanitizer(table)
