"""DocumentContext protocol."""

from typing import Protocol


class DocumentContext(Protocol):
    """The note receiving links for a drop."""

    @property
    def folder_path(self) -> str:
        """Vault-relative folder of the note, ``/`` for the vault root."""
        ...

    def insert(self, text: str) -> None:
        """Replace the current selection with ``text``."""
        ...
