"""Directory traversal with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a directory depth-first
and builds a tree of DirectoryEntry nodes, and the ``traverse`` shortcut that
returns just the root entry.
"""

import os
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from dirr.exceptions import FilesystemError
from dirr.exclusion_rules.base_rules import BaseExclusionRules
from dirr.exclusion_rules.name_rules import NameExclusionRules
from dirr.file_system_tree.directory_entry import DirectoryEntry, iter_descendants
from dirr.file_system_tree.file_identifier import FileIdentifier
from dirr.file_system_tree.renderer import render
from dirr.file_system_tree.unreadable_action import UnreadableAction
from dirr.types import EntryKind, PathType

# A directory waiting to be listed: its path, its path relative to the root
# (with trailing slash, empty for the root), its entry, and the identities of
# the directories above it (only tracked when following symlinks)
_Pending = Tuple[Path, str, DirectoryEntry, FrozenSet[FileIdentifier]]


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access and can be refreshed to reflect
    filesystem changes.

    Ordering:
        Members of every directory are sorted by name, so the same directory
        always produces the same tree.

    Exclusion:
        Each entry's path relative to the root (with a trailing slash for
        directories) is checked once against the exclusion rules. Excluded
        entries are left out of the tree entirely, and excluded directories are
        never listed.

    Unreadable directories:
        With UnreadableAction.SKIP (default), a subdirectory that cannot be listed,
        or whose members cannot be inspected, stays in the tree, flagged ``unreadable``
        and without children, and a FilesystemError for it is appended to ``errors``.
        With RAISE the error is raised instead. The root must always be readable.

    Symbolic Link Behavior:
        By default symlinks are recorded as leaf entries and never descended.
        With follow_symlinks, links to directories are expanded; a link that
        resolves to one of its own ancestors is flagged ``loop_detected``, left
        unexpanded and reported in ``errors``.

    Attributes:
        root_path (Path): Path to the root directory, as given.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding entries.
        unreadable_action (UnreadableAction): How to handle unreadable subdirectories.
        follow_symlinks (bool): Whether to descend into symlinked directories.
        collect_metadata (bool): Whether to record size and mtime for each entry.
        errors (List[FilesystemError]): Subtrees skipped during the last build.

    Example:
        >>> tree = FileSystemTree(".")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        project
        |-- README.md
        |-- src
            |-- main.py
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        unreadable_action: UnreadableAction = UnreadableAction.SKIP,
        follow_symlinks: bool = False,
        collect_metadata: bool = False,
    ) -> None:
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.unreadable_action = unreadable_action
        self.follow_symlinks = follow_symlinks
        self.collect_metadata = collect_metadata
        self.errors: List[FilesystemError] = []
        self._tree: Optional[DirectoryEntry] = None
        self._file_count: int = 0
        self._directory_count: int = 0
        self._symlink_count: int = 0

    def get_tree(self) -> DirectoryEntry:
        """Get the root entry of the tree, building it on first access.

        Raises:
            FilesystemError: If the root path is missing, not a directory or cannot
                be listed, or if a subdirectory cannot be listed and
                unreadable_action is RAISE.
        """
        if self._tree is None:
            self._tree = self._build_tree()
            self._count_entries()
        return self._tree

    def _build_tree(self) -> DirectoryEntry:
        try:
            is_dir = self.root_path.is_dir()
        except OSError as e:
            raise FilesystemError.from_os_error(self.root_path, e) from e
        if not is_dir:
            reason = "Not a directory" if self.root_path.exists() else "No such file or directory"
            raise FilesystemError(self.root_path, reason)

        self.errors = []
        root = DirectoryEntry(self._root_name(), kind=EntryKind.DIRECTORY)

        ancestors: FrozenSet[FileIdentifier] = frozenset()
        if self.follow_symlinks:
            root_id = FileIdentifier.from_path(self.root_path)
            if root_id is not None:
                ancestors = frozenset([root_id])

        stack: List[_Pending] = [(self.root_path, "", root, ancestors)]
        while stack:
            path, relative_path, entry, ancestors = stack.pop()
            try:
                names = self._list_directory(path)
            except FilesystemError as e:
                self._skip_unreadable(entry, entry is root, e)
                continue

            expandable: List[_Pending] = []
            error_count = len(self.errors)
            try:
                for name in names:
                    child = self._create_entry(path / name, relative_path + name, entry, ancestors)
                    if child is not None:
                        expandable.append(child)
            except OSError as e:
                # Listable but not searchable (e.g. mode r--): members cannot be inspected
                entry.children = ()
                del self.errors[error_count:]
                self._skip_unreadable(entry, entry is root, FilesystemError.from_os_error(path, e))
                continue

            # Reversed so subdirectories are listed in name order
            stack.extend(reversed(expandable))

        return root

    def _skip_unreadable(self, entry: DirectoryEntry, is_root: bool, error: FilesystemError) -> None:
        """Flag ``entry`` as unreadable and record ``error``, or raise it.

        Raises:
            FilesystemError: If ``entry`` is the root or unreadable_action is RAISE.
        """
        if is_root or self.unreadable_action == UnreadableAction.RAISE:
            raise error
        entry.unreadable = True
        self.errors.append(error)

    def _root_name(self) -> str:
        resolved = self.root_path.resolve()
        # The filesystem root has an empty name
        return resolved.name or str(resolved)

    def _list_directory(self, path: Path) -> List[str]:
        """Return the sorted member names of ``path``.

        Raises:
            FilesystemError: If the directory cannot be listed.
        """
        try:
            return sorted(os.listdir(path))
        except OSError as e:
            raise FilesystemError.from_os_error(path, e) from e

    def _create_entry(
        self,
        path: Path,
        relative_path: str,
        parent: DirectoryEntry,
        ancestors: FrozenSet[FileIdentifier],
    ) -> Optional[_Pending]:
        """Attach an entry for ``path`` to ``parent`` unless it is excluded.

        Returns:
            The pending record if the new entry is a directory to expand, else None.

        Raises:
            OSError: If ``path`` itself cannot be inspected.
        """
        is_symlink = path.is_symlink()
        try:
            points_to_dir = path.is_dir()
        except OSError:
            points_to_dir = False

        # Symlinks to directories are matched as directories, so that name and
        # directory-only patterns also hide links named like excluded directories
        match_path = relative_path + "/" if points_to_dir else relative_path
        if self.exclusion_rules is not None and self.exclusion_rules.exclude(match_path):
            return None

        expand = points_to_dir and (self.follow_symlinks or not is_symlink)
        entry = DirectoryEntry(
            path.name,
            parent=parent,
            kind=EntryKind.DIRECTORY if expand else EntryKind.FILE,
            is_symlink=is_symlink,
        )

        if is_symlink:
            try:
                entry.symlink_target = os.readlink(path)
            except OSError:
                # Proceed without the target
                pass

        if self.collect_metadata:
            self._collect_metadata(entry, path, follow=self.follow_symlinks or not is_symlink)

        if not expand:
            return None

        child_ancestors = ancestors
        if self.follow_symlinks:
            file_id = FileIdentifier.from_path(path)
            if file_id is not None:
                if file_id in ancestors:
                    entry.loop_detected = True
                    self.errors.append(FilesystemError(path, "Symbolic link loop detected"))
                    return None
                child_ancestors = ancestors | {file_id}

        return (path, match_path, entry, child_ancestors)

    @staticmethod
    def _collect_metadata(entry: DirectoryEntry, path: Path, follow: bool) -> None:
        try:
            stat_info = path.stat() if follow else path.lstat()
        except OSError:
            # Rendered as "metadata unavailable"
            return
        entry.size_bytes = stat_info.st_size
        entry.modified = stat_info.st_mtime

    def _count_entries(self) -> None:
        """Count files, directories and symlinks below the root."""
        self._file_count = 0
        self._directory_count = 0
        self._symlink_count = 0
        if self._tree is None:
            return

        for node in iter_descendants(self._tree):
            if node.is_symlink:
                self._symlink_count += 1
            if node.is_dir:
                self._directory_count += 1
            elif not node.is_symlink:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the number of regular files in the tree (symlinks not included)."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root.

        Followed symlinks to directories count as directories.
        """
        self.get_tree()
        return self._directory_count

    def get_symlink_count(self) -> int:
        """Get the number of symlinks in the tree, followed or not."""
        self.get_tree()
        return self._symlink_count

    def iterate_entries(self) -> Iterator[Tuple[DirectoryEntry, str]]:
        """Iterate over all entries below the root in depth-first order.

        Yields:
            Pairs of (entry, path relative to the root, using forward slashes).
        """
        for node in iter_descendants(self.get_tree()):
            yield node, "/".join(n.name for n in node.path[1:])

    def stream_tree_representation(
        self, show_meta: bool = False, continuous_guides: bool = False, now: Optional[float] = None
    ) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        See ``dirr.file_system_tree.renderer.render`` for the layout.

        Raises:
            FilesystemError: If the tree cannot be built.
        """
        return render(self.get_tree(), show_meta=show_meta, continuous_guides=continuous_guides, now=now)

    def get_tree_representation(
        self, show_meta: bool = False, continuous_guides: bool = False, now: Optional[float] = None
    ) -> str:
        """Get the complete tree representation as a single string."""
        return "\n".join(self.stream_tree_representation(show_meta, continuous_guides, now))

    def refresh(self) -> None:
        """Discard the cached tree and counts and rebuild from the filesystem."""
        self._tree = None
        self.errors = []
        self.get_tree()


def traverse(
    root_path: PathType,
    exclusion_rules: Union[BaseExclusionRules, Iterable[str], None] = None,
    unreadable_action: UnreadableAction = UnreadableAction.SKIP,
    follow_symlinks: bool = False,
    collect_metadata: bool = False,
) -> DirectoryEntry:
    """Walk ``root_path`` and return the root entry of its tree.

    Args:
        root_path: Directory to walk.
        exclusion_rules: Exclusion rules, or a plain collection of directory names
            to exclude.
        unreadable_action: How to handle unreadable subdirectories.
        follow_symlinks: Whether to descend into symlinked directories.
        collect_metadata: Whether to record size and mtime for each entry.

    Raises:
        FilesystemError: If the root cannot be read.

    Example:
        >>> root = traverse("project", {"node_modules"})  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['README.md', 'src']
    """
    if isinstance(exclusion_rules, str):
        exclusion_rules = NameExclusionRules([exclusion_rules])
    elif exclusion_rules is not None and not isinstance(exclusion_rules, BaseExclusionRules):
        exclusion_rules = NameExclusionRules(exclusion_rules)
    tree = FileSystemTree(
        root_path,
        exclusion_rules,
        unreadable_action=unreadable_action,
        follow_symlinks=follow_symlinks,
        collect_metadata=collect_metadata,
    )
    return tree.get_tree()
