"""Output schemas for resolve commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ResolveSimulateOutput(BaseOutputSchema):
    """Output schema for resolve simulate command.

    Mirrors what a real drop of ``file_path`` onto a note in ``note_folder``
    would do, without uploading or editing anything.
    """

    file_path: str = Field(..., description="Local path of the simulated dropped file")
    note_folder: str = Field(..., description="Vault-relative folder of the target note")
    path_mode: str = Field(..., description="Active path mode: note or local")
    decision: str | None = Field(..., description="upload, link_only, local_link, or null if unresolved")
    reason: str = Field(..., description="How the destination was computed")
    remote_path: str | None = Field(..., description="Computed remote path, null when none")
    remote_url: str | None = Field(..., description="Full URL of the remote path, null when none")
    remote_exists: bool | None = Field(..., description="Result of the existence probe, null when not probed")
    will_upload: bool = Field(..., description="True if a drop would upload the file")
    link: str | None = Field(..., description="Markdown link a drop would insert, null when nothing is inserted")


schema_registry.register_output_schema("resolve", "simulate", ResolveSimulateOutput)
