"""
Small text helpers for building safe filenames.
"""
from showname.utils.constants import WHITESPACE_RUN_REGEX


def collapse_whitespace(text: str) -> str:
    """Collapse every run of whitespace into a single space, without trimming the ends."""
    return WHITESPACE_RUN_REGEX.sub(" ", text)


def sanitize_filename(name: str) -> str:
    """
    Remove invalid filesystem characters from a name.
    Uses str.translate() for optimal performance.
    """
    invalid_chars = '<>:"/\\|?*'
    translation_table = str.maketrans('', '', invalid_chars)
    return name.translate(translation_table).strip()
