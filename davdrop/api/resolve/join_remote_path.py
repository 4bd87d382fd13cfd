"""Join remote path segments into a rooted POSIX path."""

import posixpath
import re

_REPEATED_SLASHES = re.compile(r"/+")


def join_remote_path(*parts: str) -> str:
    """Join ``parts`` with ``/`` and normalize the result.

    Empty parts are skipped, runs of slashes collapse to one, ``.`` and ``..``
    are resolved, a trailing slash is dropped and the result always starts
    with ``/``.

    Examples:
        >>> join_remote_path("/docs", "notes//sub")
        "/docs/notes/sub"
        >>> join_remote_path("sync", "")
        "/sync"
    """
    joined = "/" + "/".join(part for part in parts if part)
    return posixpath.normpath(_REPEATED_SLASHES.sub("/", joined))
