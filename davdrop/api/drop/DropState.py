"""DropState enum: where a dropped file is in its handling."""

from enum import Enum


class DropState(str, Enum):
    RESOLVING = "resolving"
    UPLOADING = "uploading"
    LINKING = "linking"
    LINKING_ONLY = "linking_only"
    INSERTING_LOCAL_LINK = "inserting_local_link"
    DONE = "done"
    FAILED = "failed"
