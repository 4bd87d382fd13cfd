"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for documents and stores.
"""

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    FakeWebDAV,
    minimal_config_dict,
    minimal_davdrop_config,
    run_cmd,
)
from davdrop.api.remote.RemoteStore import RemoteStore

__all__ = [
    "FakeWebDAV",
    "MemoryDocument",
    "MemoryItem",
    "minimal_config_dict",
    "minimal_davdrop_config",
    "run_cmd",
]


class MemoryDocument:
    """DocumentContext keeping inserted text in a list."""

    def __init__(self, folder_path: str = "/"):
        self._folder_path = folder_path
        self.inserted: list[str] = []

    @property
    def folder_path(self) -> str:
        return self._folder_path

    def insert(self, text: str) -> None:
        self.inserted.append(text)


class MemoryItem:
    """DroppedItem with in-memory content; ``error`` makes read_bytes raise."""

    def __init__(self, path: str, data: bytes = b"data", error: Exception | None = None):
        self.path = path
        self.name = path.replace("\\", "/").split("/")[-1]
        self._data = data
        self._error = error
        self.reads = 0

    def read_bytes(self) -> bytes:
        self.reads += 1
        if self._error is not None:
            raise self._error
        return self._data


@pytest.fixture
def fake_store(fake_webdav: FakeWebDAV) -> RemoteStore:
    """RemoteStore talking to the in-memory server."""
    return RemoteStore(minimal_davdrop_config().remote, transport=fake_webdav)
