"""Unit tests for RemoteStore against an in-memory WebDAV server."""

import base64

import pytest

from davdrop.api.config.RemoteConfig import RemoteConfig
from davdrop.api.link.encode_remote_path import encode_remote_path
from davdrop.api.remote.RemoteResponse import RemoteResponse
from davdrop.api.remote.RemoteStore import RemoteStore
from davdrop.api.remote.RemoteTransportError import RemoteTransportError
from tests.conftest import WEBDAV_URL

pytestmark = pytest.mark.remote


class TestRequest:
    def test_url_for_strips_trailing_slash(self, fake_store):
        assert fake_store.url_for("/a/b.png") == "https://dav.example.com/remote.php/webdav/a/b.png"

    def test_url_for_encodes_segments(self, fake_store):
        assert fake_store.url_for("/My Docs/a#1?.png") == (
            "https://dav.example.com/remote.php/webdav/My%20Docs/a%231%3F.png"
        )

    def test_basic_auth_on_every_call(self, fake_store, fake_webdav):
        fake_store.exists("/a")
        fake_store.exists("/b")
        expected = "Basic " + base64.b64encode(b"alice:s3cret").decode()
        assert [h["Authorization"] for h in fake_webdav.headers] == [expected, expected]

    def test_credentials_read_per_call(self, fake_webdav):
        config = RemoteConfig(webdav_url=WEBDAV_URL, username="alice", password="old")
        store = RemoteStore(config, transport=fake_webdav)
        store.exists("/")
        config.password = "new"
        store.exists("/")
        assert fake_webdav.headers[1]["Authorization"] == "Basic " + base64.b64encode(b"alice:new").decode()

    def test_request_returns_none_on_404(self, fake_store):
        assert fake_store.request("GET", "/missing.png") is None

    def test_request_raises_on_error_status(self, fake_store, fake_webdav):
        fake_webdav.fail["/a"] = 500
        with pytest.raises(RemoteTransportError) as exc_info:
            fake_store.request("GET", "/a")
        assert exc_info.value.status == 500
        assert exc_info.value.method == "GET"

    def test_timeout_passed_to_transport(self):
        seen = []

        def transport(method, url, headers, body, timeout):
            seen.append(timeout)
            return RemoteResponse(status=207)

        config = RemoteConfig(webdav_url=WEBDAV_URL, username="u", password="p", timeout_secs=5)
        RemoteStore(config, transport=transport).exists("/")
        assert seen == [5.0]


class TestExists:
    def test_exists_true(self, fake_store, fake_webdav):
        fake_webdav.add_file("/Obsidian/a.png")
        assert fake_store.exists("/Obsidian/a.png")
        assert fake_store.exists("/Obsidian")
        assert fake_webdav.calls[0] == ("PROPFIND", "/Obsidian/a.png")
        assert fake_webdav.headers[0]["Depth"] == "0"

    def test_exists_false_when_absent(self, fake_store):
        assert fake_store.exists("/nope.png") is False

    def test_exists_false_on_error_status(self, fake_store, fake_webdav):
        fake_webdav.fail["/a.png"] = 500
        assert fake_store.exists("/a.png") is False

    def test_exists_false_when_unreachable(self, fake_store, fake_webdav):
        fake_webdav.unreachable.add("/a.png")
        assert fake_store.exists("/a.png") is False


class TestCreateDirectory:
    def test_creates_each_segment(self, fake_store, fake_webdav):
        fake_store.create_directory("/a/b/c")
        assert {"/a", "/a/b", "/a/b/c"} <= fake_webdav.collections
        assert fake_webdav.methods("MKCOL") == ["/a", "/a/b", "/a/b/c"]

    def test_twice_is_idempotent(self, fake_store, fake_webdav):
        fake_store.create_directory("/a/b")
        state = set(fake_webdav.collections)
        fake_store.create_directory("/a/b")
        assert fake_webdav.collections == state
        assert fake_webdav.methods("MKCOL") == ["/a", "/a/b"]

    def test_skips_existing_parents(self, fake_store, fake_webdav):
        fake_webdav.collections.add("/a")
        fake_store.create_directory("/a/b")
        assert fake_webdav.methods("MKCOL") == ["/a/b"]

    def test_root_is_noop(self, fake_store, fake_webdav):
        fake_store.create_directory("/")
        assert fake_webdav.calls == []

    def test_already_exists_status_tolerated(self, fake_store, fake_webdav):
        fake_webdav.fail["/a"] = 405
        fake_store.create_directory("/a")
        assert fake_webdav.methods("MKCOL") == ["/a"]

    def test_other_failure_propagates(self, fake_store, fake_webdav):
        fake_webdav.fail["/a"] = 403
        with pytest.raises(RemoteTransportError) as exc_info:
            fake_store.create_directory("/a/b")
        assert exc_info.value.status == 403
        assert "/a/b" not in fake_webdav.collections


class TestPut:
    def test_put_stores_bytes(self, fake_store, fake_webdav):
        fake_store.create_directory("/a")
        fake_store.put("/a/x.bin", b"\x00\x01payload")
        assert fake_webdav.files["/a/x.bin"] == b"\x00\x01payload"
        put_index = fake_webdav.calls.index(("PUT", "/a/x.bin"))
        assert fake_webdav.headers[put_index]["Content-Type"] == "application/octet-stream"

    def test_put_reserved_characters_reach_exact_path(self, fake_store, fake_webdav):
        path = "/Obsidian/Report #3 ?50%.png"
        fake_store.create_directory("/Obsidian")
        fake_store.put(path, b"payload")
        assert fake_webdav.urls[-1] == "https://dav.example.com/remote.php/webdav" + encode_remote_path(path)
        assert fake_webdav.files == {path: b"payload"}
        assert fake_store.exists(path)

    def test_put_replaces(self, fake_store, fake_webdav):
        fake_webdav.add_file("/x.bin", b"old")
        fake_store.put("/x.bin", b"new")
        assert fake_webdav.files["/x.bin"] == b"new"

    def test_put_without_parent_fails(self, fake_store):
        with pytest.raises(RemoteTransportError) as exc_info:
            fake_store.put("/missing/x.bin", b"data")
        assert exc_info.value.status == 409

    def test_put_404_fails(self, fake_store, fake_webdav):
        fake_webdav.fail["/x.bin"] = 404
        with pytest.raises(RemoteTransportError) as exc_info:
            fake_store.put("/x.bin", b"data")
        assert exc_info.value.status == 404

    def test_put_unreachable_fails(self, fake_store, fake_webdav):
        fake_webdav.unreachable.add("/x.bin")
        with pytest.raises(RemoteTransportError):
            fake_store.put("/x.bin", b"data")


class TestFetchUrl:
    def test_fetch_url(self, fake_store, fake_webdav):
        fake_webdav.add_file("/img/a.png", b"PNG", "image/png")
        response = fake_store.fetch_url(WEBDAV_URL + "img/a.png")
        assert response.body == b"PNG"
        assert response.headers["content-type"] == "image/png"

    def test_fetch_url_404_raises(self, fake_store):
        with pytest.raises(RemoteTransportError) as exc_info:
            fake_store.fetch_url(WEBDAV_URL + "img/none.png")
        assert exc_info.value.status == 404
