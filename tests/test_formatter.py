"""
Unit tests for composing normalized episode filenames.
"""

from showname.rename.formatter import EMPTY_SPEC, RenameSpec, compose
from showname.rename.parser import ParseResult, parse


class TestRenameSpec:
    """Override normalization."""

    def test_defaults_are_empty(self):
        assert EMPTY_SPEC.new_show_name is None
        assert EMPTY_SPEC.season_override is None

    def test_empty_strings_mean_not_provided(self):
        spec = RenameSpec(new_show_name="", season_override="")

        assert spec == EMPTY_SPEC

    def test_whitespace_only_means_not_provided(self):
        assert RenameSpec(new_show_name="   ", season_override=" \t").new_show_name is None

    def test_values_are_trimmed(self):
        spec = RenameSpec(new_show_name="  Show  ", season_override=" 2 ")

        assert spec.new_show_name == "Show"
        assert spec.season_override == "2"


class TestCompose:
    """Name layout and precedence rules."""

    def test_no_season(self):
        result = parse("[Group]Show Name - 1 [1080p][ABCDEF12].mkv")

        assert compose(result, EMPTY_SPEC) == "Show Name - 1.mkv"

    def test_spec_is_optional(self):
        assert compose(parse("[Group]Show Name - 1 [1080p].mkv")) == "Show Name - 1.mkv"

    def test_parsed_season(self):
        result = parse("[Group]Show Name - S02E05 [x264].mkv")

        assert compose(result) == "Show Name - S02E05.mkv"

    def test_parsed_season_beats_override(self):
        result = parse("[Group]Show Name - S02E05 [x264].mkv")

        assert compose(result, RenameSpec(season_override="9")) == "Show Name - S02E05.mkv"

    def test_override_name_and_season(self):
        result = parse("[G]Name - 3 [x].avi")
        spec = RenameSpec(new_show_name="Localized Name", season_override="1")

        assert compose(result, spec) == "Localized Name - S1E3.avi"

    def test_empty_override_name_keeps_parsed_name(self):
        result = parse("[G]Name - 3 [x].avi")

        assert compose(result, RenameSpec(new_show_name="")) == "Name - 3.avi"

    def test_no_zero_padding(self):
        result = ParseResult("Show", "1", "3", ".mkv")

        assert compose(result) == "Show - S1E3.mkv"

    def test_fallback_result(self):
        result = parse("[Group] Show Name - 05 - Episode Title [720p].mkv")

        assert compose(result) == "Show Name - 05.mkv"


class TestNormalization:
    """Whitespace collapsing and invalid characters."""

    def test_double_spaces_in_show_name_collapse(self):
        assert compose(parse("[G]Show  Name - 4.mkv")) == "Show Name - 4.mkv"

    def test_double_spaces_in_override_collapse(self):
        result = ParseResult("Show", None, "4", ".mkv")

        assert compose(result, RenameSpec(new_show_name="New    Show")) == "New Show - 4.mkv"

    def test_whole_name_is_not_trimmed(self):
        result = ParseResult("", None, "4", ".mkv")

        assert compose(result) == " - 4.mkv"

    def test_invalid_characters_removed(self):
        result = ParseResult("Show", None, "1", ".mkv")

        assert compose(result, RenameSpec(new_show_name="Re:Zero / Part?")) == "ReZero Part - 1.mkv"

    def test_deterministic(self):
        result = parse("[Group]Show Name - S02E05 [x264].mkv")

        assert compose(result) == compose(result)
