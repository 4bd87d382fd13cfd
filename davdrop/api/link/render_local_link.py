"""Render a markdown link to a file on the local disk."""

from urllib.parse import quote

# Characters encodeURI leaves alone besides letters, digits and "-_.~"
_URI_SAFE = "!*'();/?:@&=+$,#"


def render_local_link(name: str, local_path: str) -> str:
    """Build ``[name](file:///<encoded path>)``.

    Backslashes become forward slashes, so ``C:\\Docs\\a b.pdf`` turns into
    ``file:///C:/Docs/a%20b.pdf`` and ``/home/me/a.pdf`` into ``file:///home/me/a.pdf``.
    """
    normalized = local_path.replace("\\", "/").lstrip("/")
    return f"[{name}](file:///{quote(normalized, safe=_URI_SAFE)})"
