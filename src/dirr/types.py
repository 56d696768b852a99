from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds recorded during traversal.

    Symbolic links are not a separate kind: a link is recorded as a FILE unless it
    is followed into a directory, and carries its own ``is_symlink`` flag.

    Attributes:
        FILE: Anything that is not expanded as a directory
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
