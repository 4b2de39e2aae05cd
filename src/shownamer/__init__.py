"""
shownamer - command-line renaming of release-named episode files.

Wraps `showname.rename.rename_files` with argument parsing, log-level
selection and an optional log file.
"""

__version__ = "1.0.0"

# Import main function for CLI entry point
from .shownamer import main

__all__ = ["main", "__version__"]
