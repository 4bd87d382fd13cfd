"""Decision enum for a dropped file."""

from enum import Enum


class Decision(str, Enum):
    UPLOAD = "upload"
    LINK_ONLY = "link_only"
    LOCAL_LINK = "local_link"
