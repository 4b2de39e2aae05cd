"""
A media filename module for normalizing episode release names.

This module provides utilities to rename video files from release-group naming
conventions ("[Group]Show Name - 05 [1080p][ABCDEF12].mkv") into plain
"Show Name - 05.mkv" or "Show Name - S02E05.mkv" names, either in place or as
symbolic links, with an optional manifest of the original names.

The module is organized into two parts:
- Parsing, composing and batch-renaming files (`showname.rename`).
- Constants, filename helpers and structured logging (`showname.utils`).
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
