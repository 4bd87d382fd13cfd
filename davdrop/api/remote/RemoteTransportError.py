"""Remote transport error."""


class RemoteTransportError(Exception):
    """Raised when a WebDAV request fails or answers with an unexpected status."""

    def __init__(self, message: str, *, status: int | None = None, method: str = "", url: str = ""):
        self.status = status
        self.method = method
        self.url = url
        super().__init__(message)
