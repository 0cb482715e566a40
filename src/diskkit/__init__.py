"""diskkit: filesystem helpers and a cross-platform basename sanitizer.

The sanitizer is the core of the package; the filesystem facade and the
naming constants are thin wrappers over the standard library that the
surrounding applications compose with it.
"""

from diskkit.exceptions import ConfigurationError, DiskKitError, InputInvalidError
from diskkit.filesystem import (
    create_folder,
    delete_folder,
    is_real_file_path,
    is_real_folder_path,
    path_exists,
)
from diskkit.sanitizer import (
    DEFAULT_TABLE,
    HARDENED_TABLE,
    BasenameSanitizer,
    CodePointClass,
    Disposition,
    DispositionTable,
    sanitize_basename,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "BasenameSanitizer",
    "CodePointClass",
    "ConfigurationError",
    "create_folder",
    "DEFAULT_TABLE",
    "delete_folder",
    "DiskKitError",
    "Disposition",
    "DispositionTable",
    "HARDENED_TABLE",
    "InputInvalidError",
    "is_real_file_path",
    "is_real_folder_path",
    "path_exists",
    "sanitize_basename",
]
