"""Remote check API command.

CLI: davdrop remote check
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import RemoteCheckOutput


def cmd_check() -> StageResult:
    """Test that the configured WebDAV endpoint answers with the given credentials."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DavdropConfig import DavdropConfig
        from .RemoteStore import RemoteStore

        yield (0.2, "Loading configuration...")
        try:
            config = DavdropConfig.load()
        except ValueError as e:
            result_obj.output = RemoteCheckOutput(
                errors=[f"Failed to load config: {e}"],
                warnings=[],
                webdav_url="",
                reachable=False,
            ).model_dump(mode="python")
            result_obj.result = f"Remote check failed: {e}"
            result_obj.success = False
            return

        remote_cfg = config.remote
        if not remote_cfg.is_configured():
            yield (1.0, "Complete")
            result_obj.output = RemoteCheckOutput(
                errors=["remote.webdav_url, remote.username and remote.password must all be set"],
                warnings=[],
                webdav_url=remote_cfg.webdav_url,
                reachable=False,
            ).model_dump(mode="python")
            result_obj.result = "WebDAV is not configured"
            result_obj.success = False
            return

        yield (0.5, f"Probing {remote_cfg.webdav_url}...")
        reachable = RemoteStore(remote_cfg).exists("/")

        yield (1.0, "Complete")
        result_obj.output = RemoteCheckOutput(
            errors=[] if reachable else [f"No answer from {remote_cfg.webdav_url}; check URL and credentials"],
            warnings=[],
            webdav_url=remote_cfg.webdav_url,
            reachable=reachable,
        ).model_dump(mode="python")
        result_obj.result = "WebDAV connection OK" if reachable else "WebDAV connection failed"
        result_obj.success = reachable

    return StageResult(
        announce="Checking WebDAV connection...",
        progress_callback=do_work,
    )
