"""Notice model (UNO: single model)."""

from dataclasses import asdict, dataclass
from typing import Literal


@dataclass(frozen=True)
class Notice:
    """A transient user-visible notification."""

    level: Literal["info", "warning", "error"]
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
