"""ImageReplacement model (UNO: single model)."""

from dataclasses import dataclass

from .RemoteImage import RemoteImage


@dataclass(frozen=True)
class ImageReplacement:
    """A remote image and its inline data, None while not loaded."""

    image: RemoteImage
    data_url: str | None = None

    @property
    def loaded(self) -> bool:
        return self.data_url is not None
