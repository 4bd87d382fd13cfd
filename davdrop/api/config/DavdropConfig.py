"""Top-level davdrop configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .PreviewConfig import PreviewConfig
from .RemoteConfig import RemoteConfig
from .UploadConfig import UploadConfig


class DavdropConfig(BaseModel):
    """Top-level configuration for davdrop.

    Every section and field has a default, so a partial (or missing) file
    loads with the gaps filled in.
    """

    model_config = ConfigDict(extra="forbid")

    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @property
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        return get_config_path()

    @classmethod
    def load(cls) -> "DavdropConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
