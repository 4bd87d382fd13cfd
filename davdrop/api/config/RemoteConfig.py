"""Remote WebDAV endpoint configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RemoteConfig(BaseModel):
    """Where to upload and how to authenticate."""

    model_config = ConfigDict(extra="forbid")

    webdav_url: str = Field("", description="Full URL of the WebDAV root, e.g. https://dav.example.com/")
    username: str = Field("", description="WebDAV user name")
    password: str = Field("", description="WebDAV password")
    timeout_secs: float = Field(30.0, gt=0, description="Per-request timeout in seconds")

    def missing_fields(self) -> list[str]:
        """Names of the connection fields that are still empty."""
        return [name for name in ("webdav_url", "username", "password") if not getattr(self, name)]

    def is_configured(self) -> bool:
        """True when endpoint and credentials are all set."""
        return not self.missing_fields()

    @property
    def base_url(self) -> str:
        """The endpoint URL with a single trailing slash removed."""
        return self.webdav_url[:-1] if self.webdav_url.endswith("/") else self.webdav_url
