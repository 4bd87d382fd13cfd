"""Mapping between a local folder prefix and a remote folder."""

from pydantic import BaseModel, ConfigDict, Field


class PathMapping(BaseModel):
    """A rule rerouting files under ``local_path`` to ``remote_path``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    local_path: str = Field("", description="Local folder prefix (vault-relative in note mode)")
    remote_path: str = Field("", description="Remote folder on the WebDAV server")
