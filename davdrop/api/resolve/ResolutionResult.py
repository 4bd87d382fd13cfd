"""ResolutionResult model."""

from dataclasses import dataclass

from .Decision import Decision


@dataclass(frozen=True)
class ResolutionResult:
    """Where a dropped file goes and what to do with it.

    ``remote_path`` is None for local links, and for remote decisions when no
    destination could be computed.
    """

    remote_path: str | None
    decision: Decision
    reason: str

    @property
    def resolved(self) -> bool:
        """False when a remote decision has no destination."""
        return self.decision == Decision.LOCAL_LINK or self.remote_path is not None
