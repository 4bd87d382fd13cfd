"""RemoteResponse model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RemoteResponse:
    """Answer of the WebDAV server to a single request.

    Header names are lower-cased.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
