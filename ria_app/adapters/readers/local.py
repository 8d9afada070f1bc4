from __future__ import annotations

from pathlib import Path

from ria_app.domain.errors import PageReadError
from ria_app.domain.ports import FileReader


class LocalFileReader(FileReader):
    """Reads material files below an explicit database root.

    Paths are joined onto ``base_dir``; the process working directory is never changed.
    """

    def __init__(self, base_dir: Path | str, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir).resolve()
        self.encoding = encoding

    def path_for(self, path: str) -> Path:
        return self.base_dir / path

    def read_text(self, path: str) -> str:
        full = self.path_for(path)
        try:
            return full.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise PageReadError(f"Cannot read material file {full}: {e}") from e
