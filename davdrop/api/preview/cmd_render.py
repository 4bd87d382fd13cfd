"""Preview render API command.

CLI: davdrop preview render <note> [--output FILE]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import PreviewRenderOutput


def cmd_render(note: str, output: str | None = None) -> StageResult:
    """Write a copy of ``note`` with its WebDAV images inlined as data URLs.

    Args:
        note: Markdown note to render
        output: Destination file; defaults to ``<note>.preview.md`` beside the note
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = PreviewRenderOutput(
            errors=[message],
            warnings=[],
            note=note,
            output_path="",
            images_found=0,
            images_inlined=0,
        ).model_dump(mode="python")
        result_obj.result = f"Preview failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DavdropConfig import DavdropConfig
        from .ImageOverlay import ImageOverlay

        yield (0.1, "Loading configuration...")
        try:
            config = DavdropConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Failed to load config: {e}")
            return
        if not config.remote.is_configured():
            _fail(result_obj, "WebDAV is not configured")
            return

        note_path = Path(note).expanduser()
        if not note_path.is_file():
            _fail(result_obj, f"Note not found: {note}")
            return
        out_path = Path(output).expanduser() if output else note_path.with_suffix(".preview.md")

        yield (0.3, "Fetching images...")
        text = note_path.read_text(encoding="utf-8")
        with ImageOverlay(config) as overlay:
            rendered, replacements = overlay.render(text)

        yield (0.9, f"Writing {out_path.name}...")
        out_path.write_text(rendered, encoding="utf-8")

        inlined = sum(1 for r in replacements if r.loaded)
        failed = [r.image.url for r in replacements if not r.loaded]
        yield (1.0, "Complete")
        result_obj.output = PreviewRenderOutput(
            errors=[f"Failed to load {url}" for url in failed],
            warnings=[],
            note=str(note_path),
            output_path=str(out_path),
            images_found=len(replacements),
            images_inlined=inlined,
        ).model_dump(mode="python")
        result_obj.result = f"Inlined {inlined} of {len(replacements)} image(s)"
        result_obj.success = not failed

    return StageResult(
        announce=f"Rendering preview of {note}...",
        progress_callback=do_work,
    )
