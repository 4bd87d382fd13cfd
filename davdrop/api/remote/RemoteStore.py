"""Minimal WebDAV client: existence probe, recursive MKCOL and PUT."""

from __future__ import annotations

__all__ = ["RemoteStore", "Transport"]

import base64
import logging
from collections.abc import Callable

from ..config.RemoteConfig import RemoteConfig
from ..link.encode_remote_path import encode_remote_path
from ._requests_transport import _requests_transport
from .RemoteResponse import RemoteResponse
from .RemoteTransportError import RemoteTransportError

logger = logging.getLogger(__name__)

Transport = Callable[[str, str, dict[str, str], bytes | None, float], RemoteResponse]

# MKCOL on an existing collection
_STATUS_ALREADY_EXISTS = 405


class RemoteStore:
    """Authenticated access to one WebDAV endpoint.

    No connection state is kept between calls; credentials are read from the
    config and attached to every request.
    """

    def __init__(self, config: RemoteConfig, transport: Transport | None = None):
        self.config = config
        self._transport = transport or _requests_transport

    def url_for(self, path: str) -> str:
        """Absolute URL of a remote path, percent-encoded segment by segment."""
        return self.config.base_url + encode_remote_path(path)

    def _authorization(self) -> str:
        token = base64.b64encode(f"{self.config.username}:{self.config.password}".encode()).decode("ascii")
        return f"Basic {token}"

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None,
        body: bytes | None,
        *,
        missing_ok: bool,
    ) -> RemoteResponse | None:
        req_headers = {"Authorization": self._authorization(), **(headers or {})}
        try:
            response = self._transport(method, url, req_headers, body, self.config.timeout_secs)
        except RemoteTransportError:
            logger.error("WebDAV request failed: %s %s", method, url)
            raise

        if response.status == 404 and missing_ok:
            logger.debug("WebDAV %s %s -> 404", method, url)
            return None
        if not 200 <= response.status < 300:
            logger.error("WebDAV request failed: %s %s -> %s", method, url, response.status)
            raise RemoteTransportError(
                f"{method} {url} failed with status {response.status}",
                status=response.status,
                method=method,
                url=url,
            )
        return response

    def request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> RemoteResponse | None:
        """Send a request for a remote path.

        Returns:
            The response, or None when the server answered 404

        Raises:
            RemoteTransportError: On any other non-2xx status or transport failure
        """
        return self._send(method, self.url_for(path), headers, body, missing_ok=True)

    def exists(self, path: str) -> bool:
        """Check whether a remote path exists.

        Unreachable and absent look the same: both return False.
        """
        try:
            response = self.request("PROPFIND", path, {"Depth": "0"})
        except RemoteTransportError as e:
            logger.warning("Existence check failed for %s: %s", path, e)
            return False
        return response is not None

    def create_directory(self, path: str) -> None:
        """Create ``path`` and any missing parents; existing segments are left alone."""
        current = ""
        for part in [p for p in path.split("/") if p]:
            current += "/" + part
            if self.exists(current):
                continue
            try:
                self.request("MKCOL", current)
            except RemoteTransportError as e:
                if e.status != _STATUS_ALREADY_EXISTS:
                    raise
                logger.debug("Collection %s appeared concurrently", current)
            else:
                logger.info("Created remote folder %s", current)

    def put(self, path: str, data: bytes) -> None:
        """Upload ``data`` to ``path``, replacing whatever is there."""
        response = self.request("PUT", path, {"Content-Type": "application/octet-stream"}, data)
        if response is None:
            raise RemoteTransportError(f"PUT {self.url_for(path)} failed with status 404", status=404, method="PUT")
        logger.info("Uploaded %d bytes to %s", len(data), path)

    def fetch_url(self, url: str) -> RemoteResponse:
        """GET an absolute URL with this store's credentials."""
        response = self._send("GET", url, None, None, missing_ok=False)
        assert response is not None
        return response
