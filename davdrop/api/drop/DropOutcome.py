"""DropOutcome model."""

from dataclasses import dataclass

from ..resolve.Decision import Decision
from .DropState import DropState


@dataclass
class DropOutcome:
    """What happened to one dropped file.

    ``failed_at`` names the state that was active when handling failed.
    """

    name: str
    path: str
    state: DropState = DropState.RESOLVING
    decision: Decision | None = None
    remote_path: str | None = None
    link: str | None = None
    error: str | None = None
    failed_at: DropState | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == DropState.DONE

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "path": self.path,
            "state": self.state.value,
            "decision": self.decision.value if self.decision else None,
            "remote_path": self.remote_path,
            "link": self.link,
            "error": self.error,
            "failed_at": self.failed_at.value if self.failed_at else None,
        }
