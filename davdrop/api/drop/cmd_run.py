"""Drop run API command.

CLI: davdrop drop run <note> <file>... [--vault DIR] [--cursor OFFSET]

Uploads each file (or reuses the remote copy) and inserts one markdown link
per file into the note, in drop order.
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import DropRunOutput


def cmd_run(
    note: str,
    files: list[str],
    vault: str | None = None,
    cursor: int | None = None,
) -> StageResult:
    """Drop ``files`` onto ``note``.

    Args:
        note: Path of the markdown note receiving the links
        files: Local files, handled in the given order
        vault: Vault root; defaults to the closest folder holding ``.obsidian``
        cursor: Character offset to insert at; defaults to the end of the note
    """

    def _fail(result_obj: StageResult, message: str, errors: list[str], notices: list[dict] | None = None) -> None:
        result_obj.output = DropRunOutput(
            errors=errors,
            warnings=[],
            note=note,
            outcomes=[],
            notices=notices or [],
            links_inserted=0,
            failed=0,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DavdropConfig import DavdropConfig
        from .LocalFile import LocalFile
        from .MarkdownDocument import MarkdownDocument
        from .UploadOrchestrator import UploadOrchestrator

        yield (0.1, "Loading configuration...")
        try:
            config = DavdropConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Drop failed: {e}", [f"Failed to load config: {e}"])
            return

        yield (0.2, "Opening note...")
        note_path = Path(note).expanduser()
        if not note_path.is_file():
            _fail(result_obj, f"Note not found: {note}", [f"Note not found: {note}"])
            return
        try:
            document = MarkdownDocument(note_path, Path(vault) if vault else None, cursor=cursor)
        except (ValueError, OSError) as e:
            _fail(result_obj, f"Cannot open note: {e}", [str(e)])
            return

        orchestrator = UploadOrchestrator(config)
        items = [LocalFile(str(Path(f).expanduser().absolute())) for f in files]
        outcomes = []
        for i, outcome in enumerate(orchestrator.iter_drop(items, document)):
            outcomes.append(outcome)
            yield (0.2 + 0.7 * ((i + 1) / len(items)), f"{outcome.name}: {outcome.state.value}")

        notices = [n.to_dict() for n in orchestrator.notices]
        if not config.remote.is_configured():
            _fail(result_obj, "WebDAV is not configured", [n["message"] for n in notices], notices)
            return

        links_inserted = sum(1 for o in outcomes if o.succeeded)
        failed = len(outcomes) - links_inserted
        if document.modified:
            yield (0.95, "Saving note...")
            document.save()

        yield (1.0, "Complete")
        result_obj.output = DropRunOutput(
            errors=[f"{o.name}: {o.error}" for o in outcomes if not o.succeeded],
            warnings=config.upload.check(),
            note=str(document.path),
            outcomes=[o.to_dict() for o in outcomes],
            notices=notices,
            links_inserted=links_inserted,
            failed=failed,
        ).model_dump(mode="python")
        result_obj.result = f"Inserted {links_inserted} link(s), {failed} failed"
        result_obj.success = failed == 0

    return StageResult(
        announce=f"Dropping {len(files)} file(s) onto {note}...",
        progress_callback=do_work,
    )
