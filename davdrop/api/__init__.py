"""API module for davdrop.

Functions defined here are the single source of truth for the CLI commands.
"""

__all__ = []
