"""Action enum for handling unreadable directories during traversal."""

from enum import Enum


class UnreadableAction(str, Enum):
    """Action to take when a directory below the root cannot be listed.

    Values:
        SKIP: Keep the directory as an unexpanded entry, record the error and
            continue with its siblings (default behavior)
        RAISE: Raise a FilesystemError immediately

    An unreadable root always raises, whatever the action.
    """

    SKIP = "skip"
    RAISE = "raise"
