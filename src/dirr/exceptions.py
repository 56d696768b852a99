from dirr.types import PathType


class FilesystemError(Exception):
    """
    Exception raised when a directory cannot be read during traversal.

    This covers a missing root, a root that is not a directory, and any directory
    whose listing fails (typically permission denied). Unreadable subdirectories are
    normally recorded rather than raised; see ``UnreadableAction``.

    Attributes:
        path (str): Path of the directory that could not be read.
        reason (str): Short description of the failure.

    Example:
        >>> error = FilesystemError("/srv/private", "Permission denied")
        >>> str(error)
        'Cannot read directory /srv/private: Permission denied'
        >>> error.path
        '/srv/private'
    """

    def __init__(self, path: PathType, reason: str) -> None:
        """
        Initialize the exception with the offending path and a reason.

        Args:
            path (PathType): Path of the directory that could not be read.
            reason (str): Short description of the failure.
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read directory {self.path}: {reason}")

    @classmethod
    def from_os_error(cls, path: PathType, error: OSError) -> "FilesystemError":
        """
        Build a FilesystemError from an OSError raised while reading ``path``.

        Example:
            >>> err = FilesystemError.from_os_error("/x", PermissionError(13, "Permission denied"))
            >>> err.reason
            'Permission denied'
        """
        return cls(path, error.strerror or str(error))


class ConfigurationError(Exception):
    """
    Exception raised when the command line is syntactically valid but unusable.

    argparse already rejects unknown flags and missing values; this covers the
    checks performed afterwards, such as an exclusion name containing a path
    separator.

    Example:
        >>> error = ConfigurationError("Invalid exclusion name: 'a/b'")
        >>> str(error)
        "Invalid exclusion name: 'a/b'"
    """

    pass
