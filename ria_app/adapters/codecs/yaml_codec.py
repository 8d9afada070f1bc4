from __future__ import annotations

import yaml

from ria_app.domain.ports import StoreCodec
from ria_app.store.store import Store


class YamlStoreCodec(StoreCodec):
    name = "yaml"
    suffixes = (".yml", ".yaml")

    def dumps(self, store: Store) -> bytes:
        payload = store.model_dump(mode="json")
        text = yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
        return text.encode("utf-8")

    def loads(self, data: bytes) -> Store:
        return Store.model_validate(yaml.safe_load(data.decode("utf-8")))
