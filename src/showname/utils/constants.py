"""
Constants and configuration settings for episode renaming.

This module holds the accepted video extensions, the filename patterns used by
the parser, the status codes reported by the batch layer, and the few
settings that can be supplied through the environment (or a ``.env`` file).
Nothing here is ever written back; configuration is read once at import time.
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# Accepted video file extensions (matched case-sensitively)
VIDEO_EXTENSIONS = (".mkv", ".avi", ".mp4")
_EXTENSION_GROUP = "|".join(re.escape(ext) for ext in VIDEO_EXTENSIONS)

# A single bracketed or parenthesized metadata tag, e.g. "[1080p]" or "(x264)"
_TAG = r"[\[(][^\[\]()]*[\])]"

# Regex patterns for filename parsing
PRIMARY_EPISODE_REGEX = re.compile(
    rf"^(?:{_TAG})?\s*"
    r"(?P<show>.+?)\s*-\s*"
    r"(?:S(?P<season>\d+))?E?(?P<episode>\d+)"
    rf"\s*(?:{_TAG}\s*)*"
    rf"(?P<extension>{_EXTENSION_GROUP})$"
)
FALLBACK_EPISODE_REGEX = re.compile(
    rf"^(?:{_TAG})?\s*"
    r"(?P<show>.+?)\s*-\s*"
    r"(?P<episode>\d+)\s*-\s*"
    r"(?P<description>[^\[\]()]+?)"
    rf"\s*(?:{_TAG}\s*)*"
    rf"(?P<extension>{_EXTENSION_GROUP})$"
)
SEASON_LABEL_REGEX = re.compile(r"\D+(\d+)")
WHITESPACE_RUN_REGEX = re.compile(r"\s+")

# Manifest of original names, written once per folder
MANIFEST_NAME = os.getenv("SHOWNAMER_MANIFEST_NAME", ".original_names.txt")

# Logging configuration
LOG_LEVEL = os.getenv("SHOWNAMER_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("SHOWNAMER_LOG_FILE")

# Processing status codes
STATUS_PLANNED = "PLANNED"
STATUS_RENAMED = "RENAMED"
STATUS_LINKED = "LINKED"
STATUS_UNCHANGED = "UNCHANGED"
STATUS_SKIP = "SKIP"
STATUS_FAIL = "FAIL"
STATUS_DRY_RUN = "DRY-RUN"
