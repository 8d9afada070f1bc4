# """
# Ports (interfaces) for adapters. The flattening engine and the CLI depend ONLY on these.
# """
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ria_app.store.store import Store  # pragma: no cover


class FileReader(ABC):
    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the text of the material file at `path` (relative to the database root).

        Implementations raise PageReadError when the file cannot be read.
        """


class StoreCodec(ABC):
    name: str = ""
    suffixes: tuple[str, ...] = ()

    @abstractmethod
    def dumps(self, store: Store) -> bytes:
        """Encode a Store into bytes."""

    @abstractmethod
    def loads(self, data: bytes) -> Store:
        """Decode bytes produced by `dumps` back into an equivalent Store."""


class MaterialDB(ABC):
    @abstractmethod
    def list_materials(self) -> list[str]:
        """Return available material identifiers (composite keys)."""

    @abstractmethod
    def get_nk(self, name: str, lambda_um: list[float]) -> Any:
        """Return xarray.Dataset with coords lambda_um and data vars n, k."""
