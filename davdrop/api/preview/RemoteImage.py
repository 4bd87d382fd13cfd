"""RemoteImage model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemoteImage:
    """A markdown image pointing at the WebDAV server.

    ``start`` and ``end`` are character offsets of the whole ``![alt](url)``.
    """

    start: int
    end: int
    alt: str
    url: str
