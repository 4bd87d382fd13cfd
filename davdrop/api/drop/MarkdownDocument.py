"""Markdown note on disk used as the drop target."""

from __future__ import annotations

__all__ = ["MarkdownDocument", "find_vault_root"]

from pathlib import Path

# Marker directory Obsidian keeps at the vault root
_VAULT_MARKER = ".obsidian"


def find_vault_root(note_path: Path) -> Path:
    """Closest ancestor of ``note_path`` holding a ``.obsidian`` folder, else its parent."""
    for candidate in note_path.parents:
        if (candidate / _VAULT_MARKER).is_dir():
            return candidate
    return note_path.parent


class MarkdownDocument:
    """A note file with a cursor, edited in memory until ``save()``.

    ``cursor`` and ``selection_end`` are character offsets; text inserted
    replaces the selection and the cursor moves past it, so consecutive
    inserts keep their order.
    """

    def __init__(
        self,
        path: Path,
        vault_dir: Path | None = None,
        cursor: int | None = None,
        selection_end: int | None = None,
    ):
        self.path = Path(path).expanduser().absolute()
        self.vault_dir = Path(vault_dir).expanduser().absolute() if vault_dir else find_vault_root(self.path)
        try:
            self.path.relative_to(self.vault_dir)
        except ValueError:
            raise ValueError(f'"{self.path}" is not in the vault {self.vault_dir}') from None

        self.text = self.path.read_text(encoding="utf-8")
        start = len(self.text) if cursor is None else max(0, min(cursor, len(self.text)))
        end = start if selection_end is None else max(start, min(selection_end, len(self.text)))
        self.cursor = start
        self.selection_end = end
        self.modified = False

    @property
    def folder_path(self) -> str:
        relative = self.path.parent.relative_to(self.vault_dir).as_posix()
        return "/" if relative == "." else relative

    def insert(self, text: str) -> None:
        self.text = self.text[: self.cursor] + text + self.text[self.selection_end :]
        self.cursor += len(text)
        self.selection_end = self.cursor
        self.modified = True

    def save(self) -> None:
        self.path.write_text(self.text, encoding="utf-8")
        self.modified = False
