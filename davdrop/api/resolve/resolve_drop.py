"""Resolve a dropped file, consulting the remote store for existing copies."""

from collections.abc import Callable
from dataclasses import replace

from ..config.UploadConfig import UploadConfig
from .Decision import Decision
from .resolve_remote_path import resolve_remote_path
from .ResolutionResult import ResolutionResult


def resolve_drop(
    file_path: str,
    file_name: str,
    note_folder: str,
    upload: UploadConfig,
    exists: Callable[[str], bool] | None = None,
) -> ResolutionResult:
    """Resolve a dropped file into exactly one decision.

    When ``upload.prefer_existing_link`` is set and ``exists`` reports the
    computed remote path as present, the decision becomes LINK_ONLY.
    """
    result = resolve_remote_path(file_path, file_name, note_folder, upload)
    if result.decision == Decision.LOCAL_LINK or result.remote_path is None:
        return result
    if upload.prefer_existing_link and exists is not None and exists(result.remote_path):
        return replace(result, decision=Decision.LINK_ONLY, reason=f"{result.reason}; already on the server")
    return result
