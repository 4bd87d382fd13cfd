"""Pick the path mapping that applies to a folder."""

from collections.abc import Iterable
from typing import Literal

from ..config.PathMapping import PathMapping
from .normalize_separators import normalize_separators

MatchStrategy = Literal["prefix", "contains"]


def find_best_mapping(
    mappings: Iterable[PathMapping],
    folder: str,
    match: MatchStrategy = "prefix",
) -> PathMapping | None:
    """Return the matching mapping with the longest ``local_path``.

    Args:
        mappings: Configured mappings, in configuration order
        folder: Folder to match against
        match: ``prefix`` compares the raw ``local_path`` with ``folder.startswith``;
            ``contains`` normalizes ``local_path`` separators and accepts it anywhere
            inside ``folder``

    Returns:
        The best mapping, or None. Among equally long matches the first wins.
        Mappings with an empty ``local_path`` never match.
    """
    best: PathMapping | None = None
    for mapping in mappings:
        if not mapping.local_path:
            continue
        if match == "prefix":
            hit = folder.startswith(mapping.local_path)
        else:
            hit = normalize_separators(mapping.local_path) in folder
        if hit and (best is None or len(mapping.local_path) > len(best.local_path)):
            best = mapping
    return best
