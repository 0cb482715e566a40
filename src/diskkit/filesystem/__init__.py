"""Filesystem facade package.

This package provides existence checks and recursive folder creation and
deletion used alongside the basename sanitizer.
"""

from diskkit.filesystem.exceptions import FilesystemError
from diskkit.filesystem.operations import (
    create_folder,
    delete_folder,
    is_real_file_path,
    is_real_folder_path,
    path_exists,
)

__all__ = [
    "create_folder",
    "delete_folder",
    "FilesystemError",
    "is_real_file_path",
    "is_real_folder_path",
    "path_exists",
]
