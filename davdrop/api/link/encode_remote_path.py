"""Percent-encode a remote path segment by segment."""

from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~"
_COMPONENT_SAFE = "!*'()"


def encode_remote_path(path: str) -> str:
    """Encode every segment of ``path``; the ``/`` separators stay as they are.

    Examples:
        >>> encode_remote_path("/My Docs/a#1.png")
        "/My%20Docs/a%231.png"
    """
    return "/".join(quote(segment, safe=_COMPONENT_SAFE) for segment in path.split("/"))
