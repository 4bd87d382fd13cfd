"""Compute the remote destination of a dropped file (no network access)."""

import posixpath

from ..config.PathMode import PathMode
from ..config.UploadConfig import UploadConfig
from .Decision import Decision
from .find_best_mapping import find_best_mapping
from .join_remote_path import join_remote_path
from .normalize_separators import normalize_separators
from .ResolutionResult import ResolutionResult

_SEPARATORS = ("/", "\\")


def _strip_one(text: str, prefixes: tuple[str, ...] = _SEPARATORS) -> str:
    return text[1:] if text.startswith(prefixes) else text


def _resolve_in_sync_folder(file_path: str, upload: UploadConfig) -> ResolutionResult:
    normalized_file = normalize_separators(file_path)
    sync_root = upload.local_sync_folder.rstrip("\\/")

    # Case-insensitive containment; slicing uses the configured length so case
    # folding cannot shift the cut.
    if not normalized_file.lower().startswith(normalize_separators(sync_root).lower()):
        return ResolutionResult(
            remote_path=None,
            decision=Decision.LOCAL_LINK,
            reason=f"{file_path} is outside the sync folder {upload.local_sync_folder}",
        )

    relative = _strip_one(normalized_file[len(sync_root) :])
    remote_base = upload.remote_sync_folder
    if remote_base.endswith("/"):
        remote_base = remote_base[:-1]
    return ResolutionResult(
        remote_path=join_remote_path(remote_base, relative),
        decision=Decision.UPLOAD,
        reason=f"inside sync folder {upload.local_sync_folder} -> {upload.remote_sync_folder}",
    )


def _note_folder_target(note_folder: str, upload: UploadConfig) -> tuple[str | None, str]:
    mapping = find_best_mapping(upload.path_mappings, note_folder, match="prefix")
    if mapping is not None:
        relative = normalize_separators(_strip_one(note_folder[len(mapping.local_path) :]))
        remote = mapping.remote_path[:-1] if mapping.remote_path.endswith("/") else mapping.remote_path
        return f"{remote}/{relative}", f"note folder matches mapping {mapping.local_path} -> {mapping.remote_path}"
    if not upload.root_folder:
        return None, f"no mapping matches note folder {note_folder} and no root folder is configured"
    return (
        join_remote_path(upload.root_folder, note_folder),
        f"no mapping matches note folder {note_folder}; using root folder {upload.root_folder}",
    )


def _file_folder_target(file_path: str, upload: UploadConfig) -> tuple[str | None, str]:
    file_dir = posixpath.dirname(normalize_separators(file_path))
    mapping = find_best_mapping(upload.path_mappings, file_dir, match="contains")
    if mapping is not None:
        return mapping.remote_path, f"file folder matches mapping {mapping.local_path} -> {mapping.remote_path}"
    if not upload.root_folder:
        return None, f"no mapping matches file folder {file_dir} and no root folder is configured"
    return upload.root_folder, f"no mapping matches file folder {file_dir}; using root folder {upload.root_folder}"


def resolve_remote_path(
    file_path: str,
    file_name: str,
    note_folder: str,
    upload: UploadConfig,
) -> ResolutionResult:
    """Decide between a remote destination and a local link for one dropped file.

    In ``local`` mode with a sync folder configured, files inside the sync folder
    keep their relative location under ``remote_sync_folder`` and files outside it
    become local links. Otherwise the best path mapping (longest ``local_path``)
    for the note folder (``note`` mode) or for the file's own folder (``local``
    mode) picks the remote folder, falling back to ``root_folder``.

    Args:
        file_path: Absolute local path of the dropped file, any separator style
        file_name: Base name used when joining onto a remote folder
        note_folder: Vault-relative folder of the active note, ``/`` for the root
        upload: Upload configuration

    Returns:
        A ResolutionResult with decision UPLOAD or LOCAL_LINK; UPLOAD with a
        None ``remote_path`` when no destination can be computed
    """
    note_folder = note_folder or "/"

    if upload.path_mode == PathMode.LOCAL and file_path and upload.has_sync_folder():
        return _resolve_in_sync_folder(file_path, upload)

    if upload.path_mode == PathMode.LOCAL and file_path:
        folder, reason = _file_folder_target(file_path, upload)
    else:
        folder, reason = _note_folder_target(note_folder, upload)

    if folder is None:
        return ResolutionResult(remote_path=None, decision=Decision.UPLOAD, reason=reason)
    return ResolutionResult(
        remote_path=join_remote_path(folder, file_name),
        decision=Decision.UPLOAD,
        reason=reason,
    )
