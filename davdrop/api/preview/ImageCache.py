"""In-memory image cache with LRU eviction and expiry."""

import time
from collections import OrderedDict
from collections.abc import Callable


class ImageCache:
    """Maps image URLs to data URLs.

    Holds at most ``max_entries`` items, evicting the least recently used
    first; an item older than ``ttl_secs`` is treated as absent.
    """

    def __init__(self, max_entries: int, ttl_secs: float, clock: Callable[[], float] = time.monotonic):
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        if ttl_secs <= 0:
            raise ValueError(f"ttl_secs must be positive, got {ttl_secs}")
        self.max_entries = max_entries
        self.ttl_secs = ttl_secs
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, str]] = OrderedDict()

    def get(self, url: str) -> str | None:
        entry = self._entries.get(url)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[url]
            return None
        self._entries.move_to_end(url)
        return value

    def set(self, url: str, value: str) -> None:
        self._entries[url] = (self._clock() + self.ttl_secs, value)
        self._entries.move_to_end(url)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and self.get(url) is not None

    def __len__(self) -> int:
        now = self._clock()
        for url in [u for u, (expires_at, _) in self._entries.items() if now >= expires_at]:
            del self._entries[url]
        return len(self._entries)
