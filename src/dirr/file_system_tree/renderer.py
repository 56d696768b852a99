"""Plain ASCII rendering of a traversed directory tree.

The renderer does no I/O: it turns a tree of DirectoryEntry nodes into text lines
and leaves writing them to the caller.
"""

from typing import Iterator, List, Optional, Tuple

from dirr.file_system_tree.directory_entry import DirectoryEntry
from dirr.file_system_tree.metadata import format_metadata

BRANCH = "|-- "
CONTINUATION = "|   "
PADDING = "    "


def format_label(entry: DirectoryEntry, show_meta: bool = False, now: Optional[float] = None) -> str:
    """Return the text shown for an entry after its branch glyph.

    Example:
        >>> format_label(DirectoryEntry("link", is_symlink=True, symlink_target="../src"))
        'link -> ../src'
        >>> format_label(DirectoryEntry("private", unreadable=True))
        'private [unreadable]'
    """
    label = entry.name
    if entry.is_symlink and entry.symlink_target:
        label += f" -> {entry.symlink_target}"
    if entry.loop_detected:
        label += " [loop detected]"
    if entry.unreadable:
        label += " [unreadable]"
    if show_meta:
        label += format_metadata(entry, now)
    return label


def render(
    root: DirectoryEntry,
    show_meta: bool = False,
    continuous_guides: bool = False,
    now: Optional[float] = None,
) -> Iterator[str]:
    """Generate the lines of a tree representation, one at a time.

    The root is printed by name alone. Every other entry is printed after one
    column per non-root ancestor and the branch glyph ``|-- ``. An ancestor's
    column is ``|   `` while that ancestor still has siblings below it and blank
    once it was the last one, so no guide line runs past a closed branch. With
    ``continuous_guides`` every column is ``|   ``, the classic
    layout where guides never close.

    Children are emitted in the order traversal attached them. The walk uses an
    explicit stack, so arbitrarily deep trees do not hit the recursion limit. Each
    call walks the tree afresh.

    Args:
        root: Root entry of the tree.
        show_meta: Append size and modification age to every non-root entry.
        continuous_guides: Draw ``|   `` in every ancestor column.
        now: Reference time for ages. Defaults to the current time.

    Yields:
        Lines of the tree representation, without trailing newlines.

    Example:
        >>> root = DirectoryEntry("root")
        >>> _ = DirectoryEntry("a.txt", parent=root)
        >>> for line in render(root):
        ...     print(line)
        root
        |-- a.txt
    """
    yield root.name

    stack: List[Tuple[DirectoryEntry, str, bool]] = []

    def push_children(entry: DirectoryEntry, prefix: str) -> None:
        children = entry.children
        # Reversed so the first child is popped first
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], prefix, index == len(children) - 1))

    push_children(root, "")
    while stack:
        entry, prefix, is_last = stack.pop()
        yield f"{prefix}{BRANCH}{format_label(entry, show_meta, now)}"
        if entry.children:
            column = PADDING if is_last and not continuous_guides else CONTINUATION
            push_children(entry, prefix + column)
