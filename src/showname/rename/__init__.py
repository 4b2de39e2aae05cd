"""
Episode file renaming.

This package turns release filenames such as
``[Group]Show Name - S02E05 [1080p][ABCDEF12].mkv`` into normalized names
(``Show Name - S02E05.mkv``) and applies them to folders of files.

Package organization:
- parser: Filename parsing. An ordered chain of pattern strategies extracts
  show name, season, episode and extension, raising `ParseError` when none
  match. Also extracts season numbers from directory labels.
- formatter: Name composition from a parse result plus per-batch overrides
  (`RenameSpec`).
- batch: Folder scanning, rename/symlink application and the original-names
  manifest.

Public API (top-level exports)
- Parsing: `parse`, `ParseResult`, `ParseError`, `extract_season_from_label`
- Composition: `compose`, `RenameSpec`
- Batch processing: `rename_files`, `BatchReport`

Example:
    import showname.rename as rename
    result = rename.parse("[G]Name - 3 [x].avi")
    rename.compose(result, rename.RenameSpec("Localized Name", "1"))  # "Localized Name - S1E3.avi"
"""
# Public parsing functions
from .parser import (
    ParseError,
    ParseResult,
    extract_season_from_label,
    parse,
)

# Name composition
from .formatter import (
    RenameSpec,
    compose,
)

# Batch processing
from .batch import BatchReport, rename_files

__all__ = [
    # Parsing
    "parse",
    "ParseResult",
    "ParseError",
    "extract_season_from_label",
    # Composition
    "compose",
    "RenameSpec",
    # Batch processing
    "rename_files",
    "BatchReport",
]
