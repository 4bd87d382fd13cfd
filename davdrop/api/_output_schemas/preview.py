"""Output schemas for preview commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class PreviewRenderOutput(BaseOutputSchema):
    """Output schema for preview render command."""

    note: str = Field(..., description="Path of the rendered note")
    output_path: str = Field(..., description="Where the rendered markdown was written, empty for none")
    images_found: int = Field(..., description="Remote images referenced by the note")
    images_inlined: int = Field(..., description="Remote images replaced with inline data")


schema_registry.register_output_schema("preview", "render", PreviewRenderOutput)
