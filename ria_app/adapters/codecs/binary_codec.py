from __future__ import annotations

import io
import pickle
from typing import Any

from ria_app.domain.ports import StoreCodec
from ria_app.store.store import Store

PICKLE_PROTOCOL = 4


class _PlainDataUnpickler(pickle.Unpickler):
    # The payload is dicts, lists, str and float only; refuse any global.
    def find_class(self, module: str, name: str) -> Any:
        raise pickle.UnpicklingError(f"Refusing to load {module}.{name} from a store file")


class BinaryStoreCodec(StoreCodec):
    """Compact binary form: a pickle of the plain-data dump, re-validated on load."""

    name = "binary"
    suffixes = (".bin", ".pkl")

    def dumps(self, store: Store) -> bytes:
        return pickle.dumps(store.model_dump(mode="json"), protocol=PICKLE_PROTOCOL)

    def loads(self, data: bytes) -> Store:
        payload = _PlainDataUnpickler(io.BytesIO(data)).load()
        return Store.model_validate(payload)
