"""An embosser that always returns an empty result."""

from __future__ import annotations

from typing import IO

from textemboss.emboss import Embosser, EmbossTextResult


class NullEmbosser(Embosser):
    """Returns an empty result for every image; useful for testing."""

    def __init__(self, uri: str = "null://") -> None:
        self.uri = uri

    def emboss_text(self, path: str) -> EmbossTextResult:
        return EmbossTextResult(text="", source="", created=0)

    def emboss_text_with_reader(self, path: str, reader: IO[bytes]) -> EmbossTextResult:
        return EmbossTextResult(text="", source="", created=0)

    def close(self) -> None:
        return None