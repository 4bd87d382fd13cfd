"""Upload destination configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .PathMapping import PathMapping
from .PathMode import PathMode


class UploadConfig(BaseModel):
    """Rules deciding where a dropped file goes on the remote store."""

    model_config = ConfigDict(extra="forbid")

    root_folder: str = Field("/", description="Remote folder used when no mapping matches")
    path_mappings: list[PathMapping] = Field(default_factory=list, description="Ordered local-to-remote folder rules")
    local_sync_folder: str = Field("", description="Absolute local folder mirrored on the remote store")
    remote_sync_folder: str = Field("", description="Remote folder corresponding to local_sync_folder")
    path_mode: PathMode = Field(PathMode.NOTE, description="note: key off the note folder; local: off the file folder")
    prefer_existing_link: bool = Field(True, description="Link to an existing remote file instead of uploading again")

    def has_sync_folder(self) -> bool:
        return bool(self.local_sync_folder and self.remote_sync_folder)

    def check(self) -> list[str]:
        """Return warnings for setups that cannot route files the way the mode intends."""
        warnings: list[str] = []
        if self.path_mode == PathMode.NOTE and not self.path_mappings:
            warnings.append("upload.path_mappings is empty; every file goes under upload.root_folder")
        if self.path_mode == PathMode.LOCAL and not self.local_sync_folder:
            warnings.append("upload.local_sync_folder is not set; falling back to path mappings")
        if self.path_mode == PathMode.LOCAL and self.local_sync_folder and not self.remote_sync_folder:
            warnings.append("upload.remote_sync_folder is not set; the sync folder is ignored")
        return warnings
