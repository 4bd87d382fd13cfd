"""Render a markdown link to a file on the WebDAV server."""

from .encode_remote_path import encode_remote_path


def render_remote_link(name: str, remote_path: str, webdav_url: str) -> str:
    """Build ``[name](<webdav_url><encoded remote_path>)``.

    Args:
        name: Link text, usually the dropped file's name
        remote_path: Remote path of the file, with or without leading slash
        webdav_url: Configured endpoint; one trailing slash is dropped
    """
    base_url = webdav_url[:-1] if webdav_url.endswith("/") else webdav_url
    clean_path = remote_path if remote_path.startswith("/") else "/" + remote_path
    return f"[{name}]({base_url}{encode_remote_path(clean_path)})"
