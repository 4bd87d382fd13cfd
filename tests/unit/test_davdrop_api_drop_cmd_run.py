"""Unit tests for drop cmd_run."""

import pytest

from davdrop.api.drop.cmd_run import cmd_run
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.drop

BASE = "https://dav.example.com/remote.php/webdav"


@pytest.fixture
def files(tmp_path):
    folder = tmp_path / "incoming"
    folder.mkdir()
    (folder / "cat.png").write_bytes(b"meow")
    (folder / "dog.png").write_bytes(b"woof")
    return folder


def test_drop_uploads_and_links(davdrop_home, patch_transport, vault, files):
    note = vault / "Projects" / "Alpha" / "plan.md"

    result = run_cmd(cmd_run, str(note), [str(files / "cat.png"), str(files / "dog.png")])

    assert result.success
    assert result.output["links_inserted"] == 2
    assert result.output["failed"] == 0
    assert patch_transport.files["/Obsidian/Projects/Alpha/cat.png"] == b"meow"
    assert patch_transport.files["/Obsidian/Projects/Alpha/dog.png"] == b"woof"
    assert note.read_text() == (
        "# Plan\n"
        f"[cat.png]({BASE}/Obsidian/Projects/Alpha/cat.png)\n"
        f"[dog.png]({BASE}/Obsidian/Projects/Alpha/dog.png)\n"
    )
    assert [o["state"] for o in result.output["outcomes"]] == ["done", "done"]


def test_drop_at_cursor(davdrop_home, patch_transport, vault, files):
    note = vault / "Projects" / "Alpha" / "plan.md"
    result = run_cmd(cmd_run, str(note), [str(files / "cat.png")], cursor=0)
    assert result.success
    assert note.read_text() == f"[cat.png]({BASE}/Obsidian/Projects/Alpha/cat.png)\n# Plan\n"


def test_drop_partial_failure(davdrop_home, patch_transport, vault, files):
    patch_transport.fail["/Obsidian/Projects/Alpha/cat.png"] = 507
    note = vault / "Projects" / "Alpha" / "plan.md"

    result = run_cmd(cmd_run, str(note), [str(files / "cat.png"), str(files / "dog.png")])

    assert not result.success
    assert result.output["links_inserted"] == 1
    assert result.output["failed"] == 1
    assert result.output["errors"][0].startswith("cat.png: ")
    assert note.read_text() == f"# Plan\n[dog.png]({BASE}/Obsidian/Projects/Alpha/dog.png)\n"


def test_drop_not_configured(empty_davdrop_home, patch_transport, vault, files):
    note = vault / "Projects" / "Alpha" / "plan.md"
    result = run_cmd(cmd_run, str(note), [str(files / "cat.png")])
    assert not result.success
    assert result.result == "WebDAV is not configured"
    assert result.output["errors"] == ["WebDAV is not configured, missing: webdav_url, username, password"]
    assert patch_transport.calls == []
    assert note.read_text() == "# Plan\n"


def test_drop_missing_note(davdrop_home, tmp_path, files):
    result = run_cmd(cmd_run, str(tmp_path / "nope.md"), [str(files / "cat.png")])
    assert not result.success
    assert result.output["errors"][0].startswith("Note not found")


def test_drop_note_outside_vault(davdrop_home, vault, tmp_path, files):
    note = tmp_path / "loose.md"
    note.write_text("")
    result = run_cmd(cmd_run, str(note), [str(files / "cat.png")], vault=str(vault))
    assert not result.success
    assert "is not in the vault" in result.output["errors"][0]


def test_drop_missing_file_fails_that_file(davdrop_home, patch_transport, vault, files):
    note = vault / "Projects" / "Alpha" / "plan.md"
    result = run_cmd(cmd_run, str(note), [str(files / "gone.png")])
    assert not result.success
    assert result.output["outcomes"][0]["failed_at"] == "uploading"
    assert note.read_text() == "# Plan\n"
