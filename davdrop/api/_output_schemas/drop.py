"""Output schemas for drop commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class DropRunOutput(BaseOutputSchema):
    """Output schema for drop run command.

    Output structure:
    - note: str - path of the note the links were inserted into
    - outcomes: list[dict] - one entry per dropped file, in drop order
    - notices: list[dict] - user-visible notifications raised during the drop
    - links_inserted: int - number of links written into the note
    - failed: int - number of files whose handling failed
    """

    note: str = Field(..., description="Path of the target note")
    outcomes: list[dict[str, Any]] = Field(..., description="Per-file outcomes in drop order")
    notices: list[dict[str, Any]] = Field(..., description="Notifications raised during the drop")
    links_inserted: int = Field(..., description="Number of links inserted into the note")
    failed: int = Field(..., description="Number of files that failed")


schema_registry.register_output_schema("drop", "run", DropRunOutput)
