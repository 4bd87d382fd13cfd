"""Normalize path separators to forward slashes."""


def normalize_separators(path: str) -> str:
    """Replace every backslash with a forward slash."""
    return path.replace("\\", "/")
