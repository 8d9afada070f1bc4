from __future__ import annotations

import pytest

from ria_app.domain.catalog import Book, Divider, Page, load_catalog, parse_catalog
from ria_app.domain.errors import CatalogStructureError

from samples import CATALOG_YML


def test_catalog_parses_dividers_books_and_pages() -> None:
    catalog = load_catalog(CATALOG_YML)
    assert [s.shelf for s in catalog] == ["main", "glass"]

    main = catalog[0]
    assert isinstance(main.content[0], Divider)
    assert isinstance(main.content[1], Book)
    ag = main.books()[0]
    assert ag.info == "main/Ag.html"
    assert isinstance(ag.content[0], Divider)
    assert [p.page for p in ag.pages()] == ["Johnson", "Choi", "Missing"]


def test_numeric_page_key_becomes_text() -> None:
    catalog = load_catalog(CATALOG_YML)
    hikari = catalog[1].books()[1]
    page = hikari.pages()[0]
    assert isinstance(page, Page)
    assert page.page == "7054"


def test_page_key_rejects_non_integer_numbers() -> None:
    doc = [{"SHELF": "s", "name": "S", "content": [{"BOOK": "b", "name": "B", "content": [
        {"PAGE": 1.5, "name": "P", "data": "x.yml"},
    ]}]}]
    with pytest.raises(CatalogStructureError):
        parse_catalog(doc)


@pytest.mark.parametrize(
    "text",
    [
        "SHELF: main",  # not a list
        "- SHELF: main\n  content: []\n",  # shelf without name
        "- SHELF: main\n  name: M\n  content:\n    - BOOK: Ag\n      content: []\n",  # book without name
        "- SHELF: main\n  name: M\n  content:\n    - BOOK: Ag\n      name: A\n      content:\n        - PAGE: x\n          name: X\n",  # page without data
        "- [unbalanced",
        "- SHELF: main\n  name: 2020-13-45\n",  # impossible timestamp
    ],
)
def test_malformed_catalog_is_fatal(text: str) -> None:
    with pytest.raises(CatalogStructureError):
        load_catalog(text)
