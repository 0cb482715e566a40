"""Naming constants and testing workspace helpers."""

from diskkit.naming.constants import (
    APP_FOLDER_NAME,
    CACHE_FOLDER_NAME,
    DATA_FOLDER_NAME,
    DEFAULT_TEXT_ENCODING,
    LAUNCH_FILE_NAME,
    PUBLIC_FOLDER_NAME,
    WORKSPACE_TESTING_FOLDER_NAME,
    WORKSPACE_TESTING_SUBFOLDER_PREFIX,
)
from diskkit.naming.workspace import (
    workspace_testing_path,
    workspace_testing_subfolder_name_for,
)

__all__ = [
    "APP_FOLDER_NAME",
    "CACHE_FOLDER_NAME",
    "DATA_FOLDER_NAME",
    "DEFAULT_TEXT_ENCODING",
    "LAUNCH_FILE_NAME",
    "PUBLIC_FOLDER_NAME",
    "WORKSPACE_TESTING_FOLDER_NAME",
    "WORKSPACE_TESTING_SUBFOLDER_PREFIX",
    "workspace_testing_path",
    "workspace_testing_subfolder_name_for",
]
