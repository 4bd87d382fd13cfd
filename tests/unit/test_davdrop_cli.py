"""CLI tests for the davdrop Typer apps."""

import json

import pytest
from typer.testing import CliRunner

from davdrop.cli._create_app import _create_app
from davdrop.cli.config import config
from davdrop.cli.resolve import resolve

pytestmark = pytest.mark.cli

runner = CliRunner()


def test_main_help():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    for name in ("config", "remote", "resolve", "drop", "preview"):
        assert name in result.output


def test_domain_help_without_subcommand():
    result = runner.invoke(config(), [])
    assert result.exit_code == 0
    assert "show" in result.output


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])
    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.output


def test_config_show_yaml(davdrop_home):
    result = runner.invoke(config(), ["show", "remote"])
    assert result.exit_code == 0
    assert "password: '********'" in result.output
    assert "s3cret" not in result.output


def test_config_show_unknown_section(davdrop_home):
    result = runner.invoke(config(), ["show", "bogus"])
    assert result.exit_code == 1
    assert "Unknown section: bogus" in result.output


def test_config_set_then_show(davdrop_home):
    result = runner.invoke(config(), ["set", "upload.root_folder", "/Vault"])
    assert result.exit_code == 0
    saved = json.loads((davdrop_home / "config.json").read_text())
    assert saved["upload"]["root_folder"] == "/Vault"


def test_config_set_delete(davdrop_home):
    result = runner.invoke(config(), ["set", "upload.root_folder", "--delete"])
    assert result.exit_code == 0
    saved = json.loads((davdrop_home / "config.json").read_text())
    assert saved["upload"]["root_folder"] == "/"


def test_resolve_simulate_json(davdrop_home):
    result = runner.invoke(
        _create_app(),
        ["--display", "json", "resolve", "simulate", "/home/me/a.png", "-n", "Projects", "--offline"],
    )
    assert result.exit_code == 0
    assert '"remote_path": "/Obsidian/Projects/a.png"' in result.output
    assert '"will_upload": true' in result.output


def test_resolve_simulate_requires_file():
    result = runner.invoke(resolve(), ["simulate"])
    assert result.exit_code == 2


def test_remote_check_not_configured(empty_davdrop_home):
    result = runner.invoke(_create_app(), ["remote", "check"])
    assert result.exit_code == 1
    assert "WebDAV is not configured" in result.output


def test_drop_run(davdrop_home, patch_transport, vault, tmp_path):
    image = tmp_path / "cat.png"
    image.write_bytes(b"meow")
    note = vault / "Projects" / "Alpha" / "plan.md"

    result = runner.invoke(_create_app(), ["drop", "run", str(note), str(image)])

    assert result.exit_code == 0
    assert "Inserted 1 link(s), 0 failed" in result.output
    assert patch_transport.files["/Obsidian/Projects/Alpha/cat.png"] == b"meow"
    assert "cat.png](https://dav.example.com/remote.php/webdav/Obsidian/Projects/Alpha/cat.png)" in note.read_text()


def test_preview_render(davdrop_home, patch_transport, tmp_path):
    patch_transport.add_file("/a.png", b"PNG")
    note = tmp_path / "n.md"
    note.write_text("![a](https://dav.example.com/remote.php/webdav/a.png)")

    result = runner.invoke(_create_app(), ["preview", "render", str(note), "-o", str(tmp_path / "out.md")])

    assert result.exit_code == 0
    assert (tmp_path / "out.md").read_text() == "![a](data:image/png;base64,UE5H)"
