from __future__ import annotations

from typing import Mapping

from ria_app.domain.errors import PageReadError
from ria_app.domain.ports import FileReader


class InMemoryFileReader(FileReader):
    """Serves material files from a path → text mapping (embedding, tests)."""

    def __init__(self, files: Mapping[str, str]) -> None:
        self._files = dict(files)

    def read_text(self, path: str) -> str:
        try:
            return self._files[path]
        except KeyError:
            raise PageReadError(f"No material file at {path!r}") from None
