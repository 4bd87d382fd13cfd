"""Output schemas for remote commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class RemoteCheckOutput(BaseOutputSchema):
    """Output schema for remote check command."""

    webdav_url: str = Field(..., description="Configured WebDAV endpoint")
    reachable: bool = Field(..., description="True if the endpoint root answered the existence probe")


schema_registry.register_output_schema("remote", "check", RemoteCheckOutput)
