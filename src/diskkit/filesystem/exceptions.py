"""Exceptions for the filesystem module."""

from diskkit.exceptions import DiskKitError

__all__ = ["FilesystemError"]


class FilesystemError(DiskKitError):
    """Raised when an operating system call in the filesystem facade fails.

    Attributes:
        path: The path the failing operation was applied to.

    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FilesystemError.

        Args:
            path: The path the failing operation was applied to.
            message: Description of the failure.

        """
        self.path = path
        super().__init__(f"{message}: {path}")
