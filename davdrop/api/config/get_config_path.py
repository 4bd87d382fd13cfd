"""Get path to davdrop config file."""

from pathlib import Path

from ...constants import CONFIG_FILENAME
from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to davdrop config file."""
    return get_home_dir(CONFIG_FILENAME)
