"""DroppedItem protocol."""

from typing import Protocol


class DroppedItem(Protocol):
    """One file delivered by a drop event."""

    @property
    def path(self) -> str:
        """Absolute local path."""
        ...

    @property
    def name(self) -> str:
        """Display name used as link text and remote file name."""
        ...

    def read_bytes(self) -> bytes:
        """Full content of the file."""
        ...
