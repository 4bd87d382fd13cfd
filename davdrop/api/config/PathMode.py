"""Path mode enum for upload destination resolution."""

from enum import Enum


class PathMode(str, Enum):
    NOTE = "note"
    LOCAL = "local"
