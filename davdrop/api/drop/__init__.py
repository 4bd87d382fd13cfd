"""Drop API module: upload dropped files and link them from a note."""

from .._output_schemas.drop import DropRunOutput

__all__ = ["DropRunOutput"]
