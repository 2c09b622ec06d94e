"""Directory tree mapping utilities.

This package builds a size-annotated, filtered and depth-limited tree of a
directory, sorts it, and renders it as a colorized text tree with a summary.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("file-mapper")
except PackageNotFoundError:
    __version__ = "unknown"
