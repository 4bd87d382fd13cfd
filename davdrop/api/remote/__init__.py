"""Remote store API module."""

from .._output_schemas.remote import RemoteCheckOutput

__all__ = ["RemoteCheckOutput"]
