"""
Build normalized episode filenames from parsed release names.

Two layouts are produced:

- "Show Name - S<season>E<episode><ext>" when a season token is known
- "Show Name - <episode><ext>" otherwise

Notes:
- A season parsed from the filename always wins over ``season_override``.
  The override (usually taken from a "Season 2" style directory) only fills
  in when the filename carries no season of its own.
- Season and episode tokens are used verbatim. "S1E3" stays "S1E3"; any zero
  padding has to be present in the tokens already.
- Whitespace runs in the assembled name collapse to one space. The whole
  string is not trimmed.
"""
from dataclasses import dataclass

from showname.rename.parser import ParseResult
from showname.utils import file_util


def _provided(value: str | None) -> str | None:
    """Treat None, empty and whitespace-only overrides as not provided."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class RenameSpec:
    """Per-batch overrides applied to every composed name."""

    new_show_name: str | None = None
    season_override: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "new_show_name", _provided(self.new_show_name))
        object.__setattr__(self, "season_override", _provided(self.season_override))


EMPTY_SPEC = RenameSpec()


def compose(result: ParseResult, spec: RenameSpec = EMPTY_SPEC) -> str:
    """
    Compose the final filename for a parsed release name.

    Parameters:
    - result (ParseResult): Components extracted by ``parser.parse``.
    - spec (RenameSpec): Optional replacement show name and season override.

    Returns:
    - str: The normalized filename, e.g. "Show Name - S02E05.mkv".

    Examples:
    - compose(parse("[Group]Show Name - 1 [1080p].mkv")) -> "Show Name - 1.mkv"
    - compose(parse("[G]Name - 3 [x].avi"), RenameSpec("Localized Name", "1"))
      -> "Localized Name - S1E3.avi"
    """
    show_name = file_util.sanitize_filename(spec.new_show_name or result.show_name)
    season = result.season or spec.season_override

    if season:
        name = f"{show_name} - S{season}E{result.episode}{result.extension}"
    else:
        name = f"{show_name} - {result.episode}{result.extension}"

    return file_util.collapse_whitespace(name)
