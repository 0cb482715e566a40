"""Testing workspace paths.

Tests that touch the disk work inside one shared folder,
WORKSPACE_TESTING_FOLDER_NAME, with one subfolder per namespace so that
suites never clean up each other's files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from diskkit.config.settings import get_settings
from diskkit.exceptions import InputInvalidError
from diskkit.naming.constants import (
    WORKSPACE_TESTING_FOLDER_NAME,
    WORKSPACE_TESTING_SUBFOLDER_PREFIX,
)

__all__ = ["workspace_testing_subfolder_name_for", "workspace_testing_path"]


def workspace_testing_subfolder_name_for(name: Any) -> str:
    """Build the testing subfolder name for a namespace.

    Args:
        name: Namespace, e.g. 'os-bravo.charlie'. Must be a non-empty str.

    Returns:
        'test-' followed by name with every dot replaced by a hyphen,
        e.g. 'test-os-bravo-charlie'.

    Raises:
        InputInvalidError: If name is not a str or is empty.

    """
    if not isinstance(name, str):
        raise InputInvalidError("name", f"expected str, got {type(name).__name__}")
    if not name:
        raise InputInvalidError("name", "must be a non-empty string")

    return WORKSPACE_TESTING_SUBFOLDER_PREFIX + name.replace(".", "-")


def workspace_testing_path(
    namespace: str, *parts: str, root: str | Path | None = None
) -> Path:
    """Build a path inside the testing workspace of a namespace.

    Args:
        namespace: Namespace passed to workspace_testing_subfolder_name_for.
        *parts: Extra path components appended at the end.
        root: Base directory; defaults to the configured workspace root.

    Returns:
        root / WORKSPACE_TESTING_FOLDER_NAME / <subfolder> / *parts

    Raises:
        InputInvalidError: If namespace is not a non-empty str.

    """
    subfolder = workspace_testing_subfolder_name_for(namespace)
    if root is None:
        root = get_settings().workspace.root

    return Path(root, WORKSPACE_TESTING_FOLDER_NAME, subfolder, *parts)
