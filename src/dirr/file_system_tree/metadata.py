"""Human-readable size and age annotations for tree entries."""

import time
from typing import Optional

from humanfriendly import format_size, format_timespan

from dirr.file_system_tree.directory_entry import DirectoryEntry

# Anything modified less than this many seconds ago is reported as "just now"
JUST_NOW_SECONDS = 60


def format_age(modified: float, now: Optional[float] = None) -> str:
    """Describe how long ago ``modified`` was, relative to ``now``.

    Args:
        modified: Modification time in epoch seconds.
        now: Reference time in epoch seconds. Defaults to the current time.

    Returns:
        ``"just now"`` for anything under a minute old (or in the future), otherwise
        the elapsed time in its largest unit, e.g. ``"3 days ago"``.

    Example:
        >>> format_age(1000.0, now=1030.0)
        'just now'
        >>> format_age(0.0, now=7200.0)
        '2 hours ago'
    """
    if now is None:
        now = time.time()
    elapsed = now - modified
    if elapsed < JUST_NOW_SECONDS:
        return "just now"
    return f"{format_timespan(elapsed, max_units=1)} ago"


def format_metadata(entry: DirectoryEntry, now: Optional[float] = None) -> str:
    """Build the metadata suffix shown after an entry's name.

    Example:
        >>> entry = DirectoryEntry("a.txt", size_bytes=2048, modified=0.0)
        >>> format_metadata(entry, now=3 * 86400.0)
        ' (2 KiB modified 3 days ago)'
        >>> format_metadata(DirectoryEntry("b.txt"))
        ' (metadata unavailable)'
    """
    if entry.size_bytes is None or entry.modified is None:
        return " (metadata unavailable)"
    return f" ({format_size(entry.size_bytes, binary=True)} modified {format_age(entry.modified, now)})"
