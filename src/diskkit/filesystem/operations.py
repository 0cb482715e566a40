"""Filesystem facade: existence checks and recursive create/delete.

These are thin wrappers over pathlib and shutil. Every call is synchronous
and blocks on the operating system. Callers are responsible for any
coordination around them, e.g. not racing two deletes of the same path.

Functions:
    path_exists: True if anything exists at the path.
    is_real_folder_path: True if the path is an existing directory.
    is_real_file_path: True if the path is an existing regular file.
    create_folder: Create a directory and its parents, idempotently.
    delete_folder: Recursively delete a directory.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import TypeVar

from diskkit.exceptions import InputInvalidError
from diskkit.filesystem.exceptions import FilesystemError
from diskkit.logging_config import get_logger

__all__ = [
    "path_exists",
    "is_real_folder_path",
    "is_real_file_path",
    "create_folder",
    "delete_folder",
]

logger = get_logger(__name__)

PathT = TypeVar("PathT", str, os.PathLike)


def _as_path(path: str | os.PathLike) -> Path | None:
    # An empty string is not a filesystem path; Path("") would mean cwd.
    if not os.fspath(path):
        return None
    return Path(path)


def path_exists(path: str | os.PathLike) -> bool:
    """Check whether anything exists at path."""
    resolved = _as_path(path)
    return resolved is not None and resolved.exists()


def is_real_folder_path(path: str | os.PathLike) -> bool:
    """Check whether path is an existing directory.

    Args:
        path: Path to check. An empty string is never a folder.

    Returns:
        True if the path exists and is a directory.

    """
    resolved = _as_path(path)
    return resolved is not None and resolved.is_dir()


def is_real_file_path(path: str | os.PathLike) -> bool:
    """Check whether path is an existing regular file.

    Args:
        path: Path to check. An empty string is never a file.

    Returns:
        True if the path exists and is a file.

    """
    resolved = _as_path(path)
    return resolved is not None and resolved.is_file()


def create_folder(path: PathT) -> PathT:
    """Create a directory and any missing parents.

    Existing directories and their contents are left untouched.

    Args:
        path: Directory to create.

    Returns:
        The path argument, unchanged.

    Raises:
        InputInvalidError: If path is empty.
        FilesystemError: If the directory cannot be created, for example
            because a file already exists at the path.

    """
    target = _as_path(path)
    if target is None:
        raise InputInvalidError("path", "must be a non-empty path")
    if target.is_dir():
        return path

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(str(target), f"Failed to create folder ({e})") from e

    logger.info("folder_created", path=str(target))
    return path


def delete_folder(path: str | os.PathLike) -> int:
    """Recursively delete a directory.

    Args:
        path: Directory to delete.

    Returns:
        1 if a directory was removed, 0 if the path does not exist or is
        not a directory.

    Raises:
        FilesystemError: If the directory exists but cannot be removed.

    """
    if not is_real_folder_path(path):
        return 0

    target = Path(path)
    try:
        shutil.rmtree(target)
    except OSError as e:
        raise FilesystemError(str(target), f"Failed to delete folder ({e})") from e

    logger.info("folder_deleted", path=str(target))
    return 1
