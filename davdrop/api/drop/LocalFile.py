"""LocalFile model."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LocalFile:
    """A dropped file read from the local disk."""

    path: str
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.path.replace("\\", "/").rstrip("/").split("/")[-1])

    def read_bytes(self) -> bytes:
        return Path(self.path).read_bytes()
