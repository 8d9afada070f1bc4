#"""
#Build configuration (pydantic v2): one catalog → one persisted Store.
#"""
from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from ria_app.adapters.codecs.registry import codec_for_path, list_codecs, make_codec
from ria_app.domain.ports import StoreCodec

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class BuildConfig(BaseModel):
    catalog: Path = Path("./catalog-nk.yml")
    output: Path = Path("./results.json")
    base_dir: Path | None = None  # None → directory of the catalog file
    format: str | None = None  # None → inferred from the output suffix
    include: Path | None = None  # newline-delimited allow-list of keys
    exclude: Path | None = None  # newline-delimited deny-list of keys
    workers: int = Field(1, ge=1)
    log_level: LogLevel = "INFO"

    def resolved_base_dir(self) -> Path:
        return self.base_dir if self.base_dir is not None else self.catalog.parent

    def resolved_codec(self) -> StoreCodec:
        if self.format is None:
            return codec_for_path(self.output)
        if self.format not in list_codecs():
            raise KeyError(f"Unknown codec '{self.format}'. Available: {', '.join(list_codecs())}")
        return make_codec(self.format)
