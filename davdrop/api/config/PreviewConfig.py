"""Preview overlay configuration."""

from pydantic import BaseModel, ConfigDict, Field


class PreviewConfig(BaseModel):
    """Image cache settings for the preview overlay."""

    model_config = ConfigDict(extra="forbid")

    cache_max_entries: int = Field(128, gt=0, description="Maximum number of images kept in memory")
    cache_ttl_secs: float = Field(3600.0, gt=0, description="Seconds before a cached image is fetched again")
