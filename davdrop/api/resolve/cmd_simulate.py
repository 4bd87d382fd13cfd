"""Resolve simulate API command.

CLI: davdrop resolve simulate <file> [--note-folder FOLDER] [--offline]

Runs the same resolver a real drop uses and reports what the drop would do,
without uploading anything or editing any note.
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ResolveSimulateOutput
from .normalize_separators import normalize_separators


def cmd_simulate(file_path: str, note_folder: str = "/", check_remote: bool = True) -> StageResult:
    """Simulate dropping ``file_path`` onto a note in ``note_folder``.

    Args:
        file_path: Local path of the file to simulate, any separator style
        note_folder: Vault-relative folder of the target note (``/`` for the vault root)
        check_remote: Probe the WebDAV server for an existing copy
    """

    def _empty_output(errors: list[str], path_mode: str = "") -> dict:
        return ResolveSimulateOutput(
            errors=errors,
            warnings=[],
            file_path=file_path,
            note_folder=note_folder,
            path_mode=path_mode,
            decision=None,
            reason="",
            remote_path=None,
            remote_url=None,
            remote_exists=None,
            will_upload=False,
            link=None,
        ).model_dump(mode="python")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DavdropConfig import DavdropConfig
        from ..link.encode_remote_path import encode_remote_path
        from ..link.render_local_link import render_local_link
        from ..link.render_remote_link import render_remote_link
        from ..remote.RemoteStore import RemoteStore
        from .Decision import Decision
        from .resolve_drop import resolve_drop

        yield (0.1, "Loading configuration...")
        if not file_path.strip():
            result_obj.output = _empty_output(["No file path given"])
            result_obj.result = "Nothing to simulate"
            result_obj.success = False
            return
        try:
            config = DavdropConfig.load()
        except ValueError as e:
            result_obj.output = _empty_output([f"Failed to load config: {e}"])
            result_obj.result = f"Simulation failed: {e}"
            result_obj.success = False
            return

        warnings = config.upload.check()
        store = None
        if check_remote:
            if config.remote.is_configured():
                store = RemoteStore(config.remote)
            else:
                warnings.append("WebDAV is not configured; remote existence was not checked")

        probed: dict[str, bool] = {}

        def probe(path: str) -> bool:
            if path not in probed:
                probed[path] = store.exists(path)  # type: ignore[union-attr]
            return probed[path]

        yield (0.4, "Resolving destination...")
        file_name = normalize_separators(file_path.strip()).split("/")[-1] or "file"
        resolution = resolve_drop(
            file_path.strip(),
            file_name,
            note_folder,
            config.upload,
            exists=probe if store is not None else None,
        )

        remote_exists: bool | None = None
        if store is not None and resolution.remote_path is not None:
            yield (0.7, f"Checking {resolution.remote_path} on the server...")
            remote_exists = probe(resolution.remote_path)

        if resolution.decision == Decision.LOCAL_LINK:
            link: str | None = render_local_link(file_name, file_path.strip())
        elif resolution.remote_path is not None:
            link = render_remote_link(file_name, resolution.remote_path, config.remote.webdav_url)
        else:
            link = None

        yield (1.0, "Complete")
        remote_url = (
            config.remote.base_url + encode_remote_path(resolution.remote_path)
            if resolution.remote_path is not None
            else None
        )
        will_upload = resolution.decision == Decision.UPLOAD and resolution.resolved
        result_obj.output = ResolveSimulateOutput(
            errors=[] if resolution.resolved else [f"Cannot compute a remote path: {resolution.reason}"],
            warnings=warnings,
            file_path=file_path,
            note_folder=note_folder,
            path_mode=config.upload.path_mode.value,
            decision=resolution.decision.value if resolution.resolved else None,
            reason=resolution.reason,
            remote_path=resolution.remote_path,
            remote_url=remote_url,
            remote_exists=remote_exists,
            will_upload=will_upload,
            link=link,
        ).model_dump(mode="python")
        if not resolution.resolved:
            result_obj.result = "Cannot compute a remote path"
        elif resolution.decision == Decision.LOCAL_LINK:
            result_obj.result = "Would insert a local file link"
        elif will_upload:
            result_obj.result = f"Would upload to {resolution.remote_path}"
        else:
            result_obj.result = f"Would link the existing {resolution.remote_path}"
        result_obj.success = resolution.resolved

    return StageResult(
        announce=f"Simulating drop of {file_path}...",
        progress_callback=do_work,
    )
