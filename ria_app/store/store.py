from __future__ import annotations

from typing import Callable, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from ria_app.domain.models import Material

KEY_SEPARATOR = ":"


def composite_key(shelf: str, book: str, page: str) -> str:
    """``"shelf:book:page"`` key of one Store item."""
    return KEY_SEPARATOR.join((shelf, book, page))


def read_key_list(text: str) -> set[str]:
    """Newline-delimited keys; blank lines and ``#`` comment lines are ignored."""
    keys = set()
    for line in text.splitlines():
        key = line.strip()
        if key and not key.startswith("#"):
            keys.add(key)
    return keys


class Store(BaseModel):
    """Flat key → Material collection.

    Items are immutable; filtering only removes entries.
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    materials: dict[str, Material] = Field(default_factory=dict)

    def get(self, key: str) -> Material | None:
        return self.materials.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self.materials)

    def items(self) -> Iterator[tuple[str, Material]]:
        return iter(self.materials.items())

    def insert(self, key: str, material: Material) -> None:
        """Insert `material` under `key`, replacing any previous item."""
        self.materials[key] = material

    def remove(self, key: str) -> Material | None:
        return self.materials.pop(key, None)

    def retain(self, keep: Callable[[str], bool]) -> None:
        """Keep only the keys for which `keep(key)` is true."""
        for key in [k for k in self.materials if not keep(k)]:
            del self.materials[key]

    def retain_keys(self, keys: Iterable[str]) -> None:
        allowed = set(keys)
        self.retain(lambda key: key in allowed)

    def remove_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.materials.pop(key, None)

    def __len__(self) -> int:
        return len(self.materials)

    def __contains__(self, key: object) -> bool:
        return key in self.materials
