"""Sequence resolution, upload and link insertion for dropped files."""

from __future__ import annotations

__all__ = ["UploadOrchestrator"]

import logging
import posixpath
from collections.abc import Callable, Iterable, Iterator
from typing import Literal

from ..config.ConfigurationMissingError import ConfigurationMissingError
from ..config.DavdropConfig import DavdropConfig
from ..link.render_local_link import render_local_link
from ..link.render_remote_link import render_remote_link
from ..remote.RemoteStore import RemoteStore
from ..resolve.Decision import Decision
from ..resolve.resolve_drop import resolve_drop
from .DocumentContext import DocumentContext
from .DroppedItem import DroppedItem
from .DropOutcome import DropOutcome
from .DropState import DropState
from .Notice import Notice

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR}


class UploadOrchestrator:
    """Handle a batch of dropped files, one at a time, in drop order.

    Every file gets its own decision. A link is inserted only after the
    upload (or existence check) for that file has succeeded; a failure is
    reported as a notice and the next file is still attempted.
    """

    def __init__(
        self,
        config: DavdropConfig,
        store: RemoteStore | None = None,
        notify: Callable[[Notice], None] | None = None,
    ):
        self.config = config
        self.store = store or RemoteStore(config.remote)
        self._notify_hook = notify
        self.notices: list[Notice] = []

    def notify(self, level: Literal["info", "warning", "error"], message: str) -> None:
        notice = Notice(level=level, message=message)
        self.notices.append(notice)
        logger.log(_LOG_LEVELS[level], message)
        if self._notify_hook is not None:
            self._notify_hook(notice)

    def iter_drop(self, items: Iterable[DroppedItem], document: DocumentContext) -> Iterator[DropOutcome]:
        """Yield one outcome per dropped file as it completes.

        Nothing is processed when the endpoint or credentials are missing.
        """
        missing = self.config.remote.missing_fields()
        if missing:
            self.notify("error", str(ConfigurationMissingError(missing)))
            return
        for item in items:
            yield self.handle_item(item, document)

    def handle_drop(self, items: Iterable[DroppedItem], document: DocumentContext) -> list[DropOutcome]:
        return list(self.iter_drop(items, document))

    def handle_item(self, item: DroppedItem, document: DocumentContext) -> DropOutcome:
        outcome = DropOutcome(name=item.name, path=item.path)
        try:
            self._run(item, document, outcome)
        except Exception as e:
            logger.exception("Drop of %s failed while %s", item.name, outcome.state.value)
            outcome.failed_at = outcome.state
            outcome.state = DropState.FAILED
            outcome.error = str(e)
            self.notify("error", f"Upload failed: {item.name}: {e}")
        return outcome

    def _run(self, item: DroppedItem, document: DocumentContext, outcome: DropOutcome) -> None:
        upload_cfg = self.config.upload
        resolution = resolve_drop(
            item.path,
            item.name,
            document.folder_path,
            upload_cfg,
            exists=self.store.exists,
        )
        outcome.decision = resolution.decision
        outcome.remote_path = resolution.remote_path
        logger.debug("Resolved %s: %s (%s)", item.name, resolution.decision.value, resolution.reason)

        if resolution.decision == Decision.LOCAL_LINK:
            outcome.state = DropState.INSERTING_LOCAL_LINK
            link = render_local_link(item.name, item.path)
            self.notify("info", f"{item.name} is outside the sync folder; inserted a local link")
        elif resolution.remote_path is None:
            outcome.failed_at = DropState.RESOLVING
            outcome.state = DropState.FAILED
            outcome.error = resolution.reason
            self.notify("error", f"Cannot compute a remote path for {item.name}: {resolution.reason}")
            return
        elif resolution.decision == Decision.LINK_ONLY:
            outcome.state = DropState.LINKING_ONLY
            self.notify("info", f"{item.name} already exists on the server")
            link = render_remote_link(item.name, resolution.remote_path, self.config.remote.webdav_url)
        else:
            outcome.state = DropState.UPLOADING
            self._upload(item, resolution.remote_path)
            outcome.state = DropState.LINKING
            link = render_remote_link(item.name, resolution.remote_path, self.config.remote.webdav_url)

        document.insert(link + "\n")
        outcome.link = link
        outcome.state = DropState.DONE

    def _upload(self, item: DroppedItem, remote_path: str) -> None:
        self.store.create_directory(posixpath.dirname(remote_path))
        data = item.read_bytes()
        self.notify("info", f"Uploading {item.name} to WebDAV...")
        self.store.put(remote_path, data)
        self.notify("info", f"Uploaded {item.name}")
