"""Find markdown images served by the WebDAV server (UNO: single function)."""

import re
from collections.abc import Iterable

from .RemoteImage import RemoteImage

IMAGE_PATTERN = re.compile(r"!\[(.*?)\]\((https?://.*?)\)")


def find_remote_images(
    text: str,
    visible_ranges: Iterable[tuple[int, int]],
    selections: Iterable[tuple[int, int]],
    webdav_url: str,
) -> list[RemoteImage]:
    """Find ``![alt](url)`` images under ``webdav_url`` inside the visible ranges.

    The base URL matches over https or http. An image containing a selection
    range is skipped so its source stays editable.

    Args:
        text: Whole document
        visible_ranges: (from, to) character offsets to scan
        selections: (from, to) character offsets of the current selections
        webdav_url: Configured endpoint
    """
    if not webdav_url:
        return []
    base = webdav_url[:-1] if webdav_url.endswith("/") else webdav_url
    base_http = base.replace("https://", "http://", 1)
    selection_list = list(selections)

    images: list[RemoteImage] = []
    for range_from, range_to in visible_ranges:
        for match in IMAGE_PATTERN.finditer(text, range_from, range_to):
            url = match.group(2)
            if not (url.startswith(base) or url.startswith(base_http)):
                continue
            start, end = match.start(), match.end()
            if any(sel_from >= start and sel_to <= end for sel_from, sel_to in selection_list):
                continue
            images.append(RemoteImage(start=start, end=end, alt=match.group(1), url=url))
    return images
