from __future__ import annotations

from ria_app.domain.ports import StoreCodec
from ria_app.store.store import Store


class JsonStoreCodec(StoreCodec):
    """Human-readable JSON, one object keyed by composite key."""

    name = "json"
    suffixes = (".json",)

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def dumps(self, store: Store) -> bytes:
        return store.model_dump_json(indent=self.indent).encode("utf-8")

    def loads(self, data: bytes) -> Store:
        return Store.model_validate_json(data)
