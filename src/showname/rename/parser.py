"""
Module for parsing release filenames into show name, season, episode and
extension components.

Release names carry arbitrary bracketed metadata (release group, resolution,
CRC hash) around a ``Show Name - Episode`` core. Parsing runs an ordered chain
of strategies, each a compiled pattern that either matches the whole filename
or yields nothing:

1. ``primary``: optional leading tag, show name, hyphen, optional ``S<n>``
   season token, optional ``E`` prefix, episode digits, trailing tags,
   extension.
2. ``fallback``: show name, hyphen, bare episode digits, a hyphen-delimited
   description, trailing tags, extension. No season support.

The fallback is only consulted when the primary pattern fails outright; a
match is all-or-nothing, so no partial result is ever returned.

Examples:
    parse("[Group]Show Name - 1 [1080p][ABCDEF12].mkv")
      -> ParseResult(show_name="Show Name", season=None, episode="1", extension=".mkv")
    parse("[Group]Show Name - S02E05 [x264].mkv")
      -> ParseResult(show_name="Show Name", season="02", episode="05", extension=".mkv")
"""
import re
from dataclasses import dataclass

from showname.utils import FALLBACK_EPISODE_REGEX, PRIMARY_EPISODE_REGEX, SEASON_LABEL_REGEX


class ParseError(ValueError):
    """Raised when no parsing strategy matches a filename."""

    def __init__(self, filename: str):
        super().__init__(f"Unrecognized release filename: {filename!r}")
        self.filename = filename


@dataclass(frozen=True)
class ParseResult:
    """Components extracted from one release filename."""

    show_name: str
    season: str | None
    episode: str
    extension: str
    strategy: str = "primary"


@dataclass(frozen=True)
class ParseStrategy:
    """A named pattern that turns a full-filename match into a ParseResult."""

    name: str
    pattern: re.Pattern

    def apply(self, filename: str) -> ParseResult | None:
        match = self.pattern.match(filename)
        if not match:
            return None
        groups = match.groupdict()
        return ParseResult(
            show_name=groups["show"].strip(),
            season=groups.get("season"),
            episode=groups["episode"],
            extension=groups["extension"],
            strategy=self.name,
        )


STRATEGIES: tuple[ParseStrategy, ...] = (
    ParseStrategy("primary", PRIMARY_EPISODE_REGEX),
    ParseStrategy("fallback", FALLBACK_EPISODE_REGEX),
)


def parse(filename: str, strategies: tuple[ParseStrategy, ...] = STRATEGIES) -> ParseResult:
    """
    Parse a release filename, trying each strategy in order.

    Raises:
        ParseError: when no strategy matches (including unsupported extensions).
    """
    for strategy in strategies:
        result = strategy.apply(filename)
        if result is not None:
            return result
    raise ParseError(filename)


def extract_season_from_label(label: str) -> str | None:
    """
    Pull a season number out of a directory label.

    Takes the first digit run that follows a run of non-digits, so
    "Season 2" -> "2" and "S03" -> "03". A label that starts with digits and
    has none after ("2nd Season") yields None.
    """
    match = SEASON_LABEL_REGEX.search(label)
    if match:
        return match.group(1)
    return None
