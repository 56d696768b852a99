"""Directory tree printing utilities.

This package provides tools for walking a directory and printing its
structure as a plain ASCII tree, with support for excluding directories
by name or by gitignore-style pattern.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirr")
except PackageNotFoundError:
    __version__ = "unknown"
