"""Replace remote markdown images with inline data."""

from __future__ import annotations

__all__ = ["ImageOverlay"]

import base64
import logging
from collections.abc import Callable, Iterable

from ..config.DavdropConfig import DavdropConfig
from ..remote.RemoteStore import RemoteStore
from ..remote.RemoteTransportError import RemoteTransportError
from .find_remote_images import find_remote_images
from .ImageCache import ImageCache
from .ImageReplacement import ImageReplacement

logger = logging.getLogger(__name__)

_DEFAULT_CONTENT_TYPE = "image/png"


class ImageOverlay:
    """Fetches images stored on the WebDAV server so they can be shown inline.

    The image cache lives from ``attach()`` to ``detach()``; use the overlay
    as a context manager to tie both to a block.
    """

    def __init__(
        self,
        config: DavdropConfig,
        store: RemoteStore | None = None,
        cache_factory: Callable[[], ImageCache] | None = None,
    ):
        self.config = config
        self.store = store or RemoteStore(config.remote)
        self._cache_factory = cache_factory or (
            lambda: ImageCache(config.preview.cache_max_entries, config.preview.cache_ttl_secs)
        )
        self._cache: ImageCache | None = None

    @property
    def attached(self) -> bool:
        return self._cache is not None

    def attach(self) -> None:
        if self._cache is None:
            self._cache = self._cache_factory()

    def detach(self) -> None:
        if self._cache is not None:
            self._cache.clear()
            self._cache = None

    def __enter__(self) -> ImageOverlay:
        self.attach()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.detach()
        return False

    def _require_cache(self) -> ImageCache:
        if self._cache is None:
            raise RuntimeError("ImageOverlay is not attached")
        return self._cache

    def build(
        self,
        text: str,
        visible_ranges: Iterable[tuple[int, int]],
        selections: Iterable[tuple[int, int]] = (),
    ) -> list[ImageReplacement]:
        """List the replaceable images, with cached data where available."""
        cache = self._require_cache()
        images = find_remote_images(text, visible_ranges, selections, self.config.remote.webdav_url)
        return [ImageReplacement(image=image, data_url=cache.get(image.url)) for image in images]

    def load(self, url: str) -> str | None:
        """Fetch ``url`` as a data URL, from cache when possible; None on failure."""
        cache = self._require_cache()
        cached = cache.get(url)
        if cached is not None:
            return cached
        try:
            response = self.store.fetch_url(url)
        except RemoteTransportError as e:
            logger.error("Failed to load image %s: %s", url, e)
            return None
        content_type = response.headers.get("content-type") or _DEFAULT_CONTENT_TYPE
        data_url = f"data:{content_type};base64,{base64.b64encode(response.body).decode('ascii')}"
        cache.set(url, data_url)
        return data_url

    def render(
        self,
        text: str,
        visible_ranges: Iterable[tuple[int, int]] | None = None,
        selections: Iterable[tuple[int, int]] = (),
    ) -> tuple[str, list[ImageReplacement]]:
        """Return ``text`` with every loadable remote image inlined.

        Images that fail to load keep their original markdown.
        """
        ranges = [(0, len(text))] if visible_ranges is None else list(visible_ranges)
        replacements = [
            r if r.loaded else ImageReplacement(image=r.image, data_url=self.load(r.image.url))
            for r in self.build(text, ranges, selections)
        ]
        rendered = text
        for replacement in sorted(replacements, key=lambda r: r.image.start, reverse=True):
            if replacement.data_url is None:
                continue
            image = replacement.image
            rendered = rendered[: image.start] + f"![{image.alt}]({replacement.data_url})" + rendered[image.end :]
        return rendered, replacements
