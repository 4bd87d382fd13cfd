"""Get davdrop home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DAVDROP_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get davdrop home directory path or path under it.

    Checks DAVDROP_HOME environment variable first, defaults to ~/.davdrop if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.davdrop")
        >>> get_home_dir("config.json")
        Path("/Users/user/.davdrop/config.json")
    """
    home_env = os.environ.get("DAVDROP_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / DAVDROP_HOME_EXT
    return home / Path(*parts) if parts else home
