"""Default transport sending WebDAV requests with requests."""

import requests  # type: ignore

from .RemoteResponse import RemoteResponse
from .RemoteTransportError import RemoteTransportError


def _requests_transport(
    method: str,
    url: str,
    headers: dict[str, str],
    body: bytes | None,
    timeout: float,
) -> RemoteResponse:
    """Send one request and wrap the answer, whatever its status."""
    try:
        response = requests.request(method, url, headers=headers, data=body, timeout=timeout)
    except requests.RequestException as e:
        raise RemoteTransportError(f"{method} {url} failed: {e}", method=method, url=url) from e
    return RemoteResponse(
        status=response.status_code,
        headers={name.lower(): value for name, value in response.headers.items()},
        body=response.content,
    )
