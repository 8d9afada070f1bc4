"""
Catalog schema (pydantic v2).

A catalog is a list of shelves; shelves hold books and dividers, books hold
pages and dividers. Node kinds are recognised by their marker key
(``SHELF``, ``BOOK``, ``PAGE``, ``DIVIDER``) as in the published catalog files.
"""
from __future__ import annotations

from typing import Annotated, Any, Callable, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .errors import CatalogStructureError


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Divider(_Node):
    divider: str = Field(..., alias="DIVIDER")


class Page(_Node):
    page: str = Field(..., alias="PAGE")
    name: str
    data: str = Field(..., description="Material file path, relative to the database root")
    info: str | None = None

    @field_validator("page", mode="before")
    @classmethod
    def _page_key_as_text(cls, value: Any) -> Any:
        # Some glass catalogs use purely numeric page keys.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


def _node_tag(marker: str) -> Callable[[Any], str]:
    def pick(value: Any) -> str:
        if isinstance(value, dict):
            return "divider" if "DIVIDER" in value or "divider" in value else marker
        if isinstance(value, Divider):
            return "divider"
        return marker

    return pick


BookContent = Annotated[
    Union[Annotated[Divider, Tag("divider")], Annotated[Page, Tag("page")]],
    Discriminator(_node_tag("page")),
]


class Book(_Node):
    book: str = Field(..., alias="BOOK")
    name: str
    info: str | None = None
    content: list[BookContent] = Field(default_factory=list)

    def pages(self) -> list[Page]:
        return [c for c in self.content if isinstance(c, Page)]


ShelfContent = Annotated[
    Union[Annotated[Divider, Tag("divider")], Annotated[Book, Tag("book")]],
    Discriminator(_node_tag("book")),
]


class Shelf(_Node):
    shelf: str = Field(..., alias="SHELF")
    name: str
    info: str | None = None
    content: list[ShelfContent] = Field(default_factory=list)

    def books(self) -> list[Book]:
        return [c for c in self.content if isinstance(c, Book)]


Catalog = list[Shelf]

_CATALOG = TypeAdapter(Catalog)


def parse_catalog(obj: Any) -> Catalog:
    """Validate an already-deserialized catalog document (list of shelf mappings)."""
    try:
        return _CATALOG.validate_python(obj)
    except ValidationError as e:
        raise CatalogStructureError(f"Catalog does not match the schema: {e}") from e


def load_catalog(text: str) -> Catalog:
    """Parse catalog YAML (or JSON) text and validate it.

    Raises CatalogStructureError for both syntax errors and schema violations:
    without a valid tree there is nothing to flatten.
    """
    try:
        obj = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as e:
        raise CatalogStructureError(f"Catalog is not valid YAML: {e}") from e
    return parse_catalog(obj)
