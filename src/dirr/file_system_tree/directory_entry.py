"""Node representation for file system entries in the tree."""

from typing import Any, Iterator, Optional

from anytree import Node

from dirr.types import EntryKind


class DirectoryEntry(Node):  # type: ignore
    """Node class representing a file or directory met during traversal.

    Extends anytree.Node with the entry's kind and the flags the renderer needs.
    Inherits parent/children management and tree iteration from anytree; children
    keep the order in which traversal attached them.

    Attributes:
        name (str): The base name of the entry.
        parent (Optional[DirectoryEntry]): The parent entry in the tree.
        kind (EntryKind): FILE or DIRECTORY.
        is_symlink (bool): True if the entry is a symbolic link.
        symlink_target (Optional[str]): Target of the symlink, as stored in the link.
        unreadable (bool): True for a directory whose listing failed and was skipped.
        loop_detected (bool): True for a followed symlink that points back at one of
            its ancestors; such entries are not expanded.
        size_bytes (Optional[int]): Size in bytes, when metadata was collected.
        modified (Optional[float]): Modification time in epoch seconds, when
            metadata was collected.
        children (tuple[DirectoryEntry]): The child entries (inherited from anytree.Node).

    Example:
        >>> root = DirectoryEntry("root", kind=EntryKind.DIRECTORY)
        >>> child = DirectoryEntry("a.txt", parent=root)
        >>> child.kind
        <EntryKind.FILE: 'file'>
        >>> [c.name for c in root.children]
        ['a.txt']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["DirectoryEntry"] = None,
        kind: EntryKind = EntryKind.FILE,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        unreadable: bool = False,
        loop_detected: bool = False,
        size_bytes: Optional[int] = None,
        modified: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.kind = kind
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target
        self.unreadable = unreadable
        self.loop_detected = loop_detected
        self.size_bytes = size_bytes
        self.modified = modified

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def iter_descendants(root: DirectoryEntry) -> Iterator[DirectoryEntry]:
    """Yield every entry below ``root`` in depth-first pre-order.

    Unlike anytree's PreOrderIter this uses an explicit stack, so depth is not
    limited by the recursion limit.

    Example:
        >>> root = DirectoryEntry("root", kind=EntryKind.DIRECTORY)
        >>> sub = DirectoryEntry("sub", parent=root, kind=EntryKind.DIRECTORY)
        >>> _ = DirectoryEntry("b", parent=sub)
        >>> _ = DirectoryEntry("c", parent=root)
        >>> [entry.name for entry in iter_descendants(root)]
        ['sub', 'b', 'c']
    """
    stack = list(reversed(root.children))
    while stack:
        entry = stack.pop()
        yield entry
        stack.extend(reversed(entry.children))
