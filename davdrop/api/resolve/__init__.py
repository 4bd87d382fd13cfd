"""Path resolution API module."""

from .._output_schemas.resolve import ResolveSimulateOutput

__all__ = ["ResolveSimulateOutput"]
