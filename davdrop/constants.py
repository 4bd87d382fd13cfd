"""Shared constants for davdrop dot-directories and artefact locations."""

DAVDROP_HOME_EXT = ".davdrop"  # user-level state/config directory suffix

CONFIG_FILENAME = "config.json"

LOG_FILENAME = "davdrop.log"
