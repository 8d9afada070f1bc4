# ria_app/adapters/codecs/registry.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Type

from ria_app.adapters.codecs.binary_codec import BinaryStoreCodec
from ria_app.adapters.codecs.json_codec import JsonStoreCodec
from ria_app.adapters.codecs.yaml_codec import YamlStoreCodec
from ria_app.domain.ports import StoreCodec
from ria_app.store.store import Store

__all__ = ["list_codecs", "make_codec", "codec_for_path", "save_store", "load_store"]

# Registry: codec name → codec class
_REGISTRY: Dict[str, Type[StoreCodec]] = {
    JsonStoreCodec.name: JsonStoreCodec,
    YamlStoreCodec.name: YamlStoreCodec,
    BinaryStoreCodec.name: BinaryStoreCodec,
}


def list_codecs() -> List[str]:
    return list(_REGISTRY.keys())


def make_codec(name: str, **kwargs: Any) -> StoreCodec:
    cls = _REGISTRY.get(name)
    if cls is None:
        raise KeyError(f"Unknown codec '{name}'. Available: {', '.join(_REGISTRY)}")
    return cls(**kwargs)


def codec_for_path(path: Path | str) -> StoreCodec:
    """Pick a codec from the file suffix (.json, .yml/.yaml, .bin/.pkl)."""
    suffix = Path(path).suffix.lower()
    for cls in _REGISTRY.values():
        if suffix in cls.suffixes:
            return cls()
    raise KeyError(f"No codec for suffix '{suffix}'. Available: {', '.join(_REGISTRY)}")


def save_store(store: Store, path: Path | str, codec: StoreCodec | None = None) -> Path:
    path = Path(path)
    codec = codec or codec_for_path(path)
    path.write_bytes(codec.dumps(store))
    return path


def load_store(path: Path | str, codec: StoreCodec | None = None) -> Store:
    path = Path(path)
    codec = codec or codec_for_path(path)
    return codec.loads(path.read_bytes())
