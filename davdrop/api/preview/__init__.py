"""Preview API module: inline remote images of a note."""

from .._output_schemas.preview import PreviewRenderOutput

__all__ = ["PreviewRenderOutput"]
