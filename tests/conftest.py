"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path
from urllib.parse import unquote, urlsplit

import pytest

from davdrop.api.config.DavdropConfig import DavdropConfig
from davdrop.api.remote.RemoteResponse import RemoteResponse
from davdrop.api.remote.RemoteTransportError import RemoteTransportError

WEBDAV_URL = "https://dav.example.com/remote.php/webdav/"


def pytest_configure(config):
    for marker in ("unit", "config", "remote", "resolve", "link", "drop", "preview", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal configured davdrop dict: endpoint and credentials set, everything else default."""
    return {
        "remote": {
            "webdav_url": WEBDAV_URL,
            "username": "alice",
            "password": "s3cret",
        },
        "upload": {
            "root_folder": "/Obsidian",
            "path_mappings": [],
        },
    }


def minimal_davdrop_config(**upload_overrides) -> DavdropConfig:
    """Build a DavdropConfig from the minimal dict with upload fields overridden."""
    config_dict = minimal_config_dict()
    config_dict["upload"].update(upload_overrides)
    return DavdropConfig(**config_dict)


# =============================================================================
# Fake WebDAV server
# =============================================================================


class FakeWebDAV:
    """In-memory WebDAV server usable as a RemoteStore transport.

    Knows PROPFIND, MKCOL, PUT and GET. Every request is recorded in ``calls``
    as ``(method, path)``; ``fail`` maps a path to a status returned for any
    method, ``unreachable`` lists paths whose requests raise.
    """

    def __init__(self, base_url: str = WEBDAV_URL):
        self.base_url = base_url.rstrip("/")
        self.base_path = urlsplit(self.base_url).path
        self.collections: set[str] = {"/"}
        self.files: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}
        self.calls: list[tuple[str, str]] = []
        self.urls: list[str] = []
        self.headers: list[dict[str, str]] = []
        self.fail: dict[str, int] = {}
        self.unreachable: set[str] = set()

    def add_file(self, path: str, data: bytes = b"", content_type: str = "image/png") -> None:
        self.files[path] = data
        self.content_types[path] = content_type
        parts = [p for p in path.split("/") if p][:-1]
        for i in range(len(parts)):
            self.collections.add("/" + "/".join(parts[: i + 1]))

    def methods(self, method: str) -> list[str]:
        """Paths requested with ``method``, in order."""
        return [path for m, path in self.calls if m == method]

    def __call__(self, method, url, headers, body, timeout):
        # Parsed like a real server: a raw "#" or "?" ends the path
        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}".startswith(self.base_url), url
        path = unquote(parts.path[len(self.base_path) :]) or "/"
        self.calls.append((method, path))
        self.urls.append(url)
        self.headers.append(dict(headers))

        if path in self.unreachable:
            raise RemoteTransportError(f"{method} {url} failed: connection refused", method=method, url=url)
        if path in self.fail:
            return RemoteResponse(status=self.fail[path])

        parent = path.rsplit("/", 1)[0] or "/"
        if method == "PROPFIND":
            found = path in self.collections or path in self.files
            return RemoteResponse(status=207 if found else 404)
        if method == "MKCOL":
            if path in self.collections or path in self.files:
                return RemoteResponse(status=405)
            if parent not in self.collections:
                return RemoteResponse(status=409)
            self.collections.add(path)
            return RemoteResponse(status=201)
        if method == "PUT":
            if parent not in self.collections:
                return RemoteResponse(status=409)
            self.files[path] = body or b""
            return RemoteResponse(status=201)
        if method == "GET":
            if path not in self.files:
                return RemoteResponse(status=404)
            return RemoteResponse(
                status=200,
                headers={"content-type": self.content_types.get(path, "")},
                body=self.files[path],
            )
        return RemoteResponse(status=501)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def davdrop_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up DAVDROP_HOME with a minimal config file.

    Returns:
        Path to the davdrop home directory
    """
    home = tmp_path / ".davdrop"
    home.mkdir()
    monkeypatch.setenv("DAVDROP_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


@pytest.fixture
def empty_davdrop_home(tmp_path: Path, monkeypatch) -> Path:
    """DAVDROP_HOME pointing at a directory without a config file."""
    home = tmp_path / ".davdrop"
    monkeypatch.setenv("DAVDROP_HOME", str(home))
    return home


@pytest.fixture
def fake_webdav() -> FakeWebDAV:
    return FakeWebDAV()


@pytest.fixture
def patch_transport(monkeypatch, fake_webdav: FakeWebDAV) -> FakeWebDAV:
    """Route every RemoteStore created without a transport to ``fake_webdav``."""
    monkeypatch.setattr("davdrop.api.remote.RemoteStore._requests_transport", fake_webdav)
    return fake_webdav


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """An Obsidian vault with one note at ``Projects/Alpha/plan.md``."""
    root = tmp_path / "vault"
    (root / ".obsidian").mkdir(parents=True)
    (root / "Projects" / "Alpha").mkdir(parents=True)
    (root / "Projects" / "Alpha" / "plan.md").write_text("# Plan\n", encoding="utf-8")
    return root


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
