"""Display abstractions."""

from .Display import Display

__all__ = ["Display", "DisplayContext", "DisplayMode", "display_context"]


def __getattr__(name: str):
    # Imported lazily: context builds its factories from davdrop.cli.display,
    # which itself imports Display from this package (circular at import time).
    if name in ("DisplayContext", "DisplayMode", "display_context"):
        from . import context

        return getattr(context, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
