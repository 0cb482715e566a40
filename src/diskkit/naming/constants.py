"""Process-wide naming constants.

These names are shared by every application that lays out its folders with
diskkit. They are plain module constants and are never mutated.
"""

__all__ = [
    "APP_FOLDER_NAME",
    "CACHE_FOLDER_NAME",
    "DATA_FOLDER_NAME",
    "PUBLIC_FOLDER_NAME",
    "WORKSPACE_TESTING_FOLDER_NAME",
    "WORKSPACE_TESTING_SUBFOLDER_PREFIX",
    "LAUNCH_FILE_NAME",
    "DEFAULT_TEXT_ENCODING",
]

APP_FOLDER_NAME = "os-app"
CACHE_FOLDER_NAME = "os-cache"
DATA_FOLDER_NAME = "os-data"
PUBLIC_FOLDER_NAME = "os-public"

WORKSPACE_TESTING_FOLDER_NAME = "os-workspace-testing"
WORKSPACE_TESTING_SUBFOLDER_PREFIX = "test-"

LAUNCH_FILE_NAME = "os-launch.js"

# Node-style encoding label, kept as written by the applications that read it.
DEFAULT_TEXT_ENCODING = "utf8"
