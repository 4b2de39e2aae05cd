"""
Constants, text helpers and structured logging shared by the renaming code.

This package collects the configuration constants (extensions, filename
patterns, status codes, environment-driven settings), the filename helpers
used when composing new names, and the key-value logger used by the batch
layer and the command line.
"""

from .constants import (
    FALLBACK_EPISODE_REGEX,
    LOG_FILE,
    LOG_LEVEL,
    MANIFEST_NAME,
    PRIMARY_EPISODE_REGEX,
    SEASON_LABEL_REGEX,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_LINKED,
    STATUS_PLANNED,
    STATUS_RENAMED,
    STATUS_SKIP,
    STATUS_UNCHANGED,
    VIDEO_EXTENSIONS,
)
from .logger import LogLevel

__all__ = [
    "VIDEO_EXTENSIONS",
    "PRIMARY_EPISODE_REGEX",
    "FALLBACK_EPISODE_REGEX",
    "SEASON_LABEL_REGEX",
    "MANIFEST_NAME",
    "LOG_LEVEL",
    "LOG_FILE",
    "STATUS_PLANNED",
    "STATUS_RENAMED",
    "STATUS_LINKED",
    "STATUS_UNCHANGED",
    "STATUS_SKIP",
    "STATUS_FAIL",
    "STATUS_DRY_RUN",
    "LogLevel",
]
