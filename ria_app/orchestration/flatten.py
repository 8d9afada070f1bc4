from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterator

from ria_app.domain.catalog import Book, Catalog, Page
from ria_app.domain.errors import PageError, PageReadError
from ria_app.domain.models import Material
from ria_app.domain.ports import FileReader
from ria_app.parsing.records import parse_raw_material, to_material
from ria_app.store.store import Store, composite_key

__all__ = ["PageRef", "FlattenReport", "iter_pages", "load_page", "flatten", "flatten_with_report"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageRef:
    """One catalog page with the names of its enclosing shelf and book."""

    key: str
    shelf_name: str
    book_name: str
    page_name: str
    data_path: str


@dataclass
class FlattenReport:
    inserted: list[str] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)  # key -> reason
    duplicates: list[str] = field(default_factory=list)


def iter_pages(catalog: Catalog) -> Iterator[PageRef]:
    """Yield every page in document order. Dividers are skipped."""
    for shelf in catalog:
        for book in shelf.content:
            if not isinstance(book, Book):
                continue
            for page in book.content:
                if not isinstance(page, Page):
                    continue
                yield PageRef(
                    key=composite_key(shelf.shelf, book.book, page.page),
                    shelf_name=shelf.name,
                    book_name=book.name,
                    page_name=page.name,
                    data_path=page.data,
                )


def load_page(ref: PageRef, reader: FileReader) -> Material:
    """Read, validate and normalize the material file of one page. Raises PageError."""
    try:
        text = reader.read_text(ref.data_path)
    except OSError as e:
        raise PageReadError(f"Cannot read material file {ref.data_path}: {e}") from e
    raw = parse_raw_material(text)
    return to_material(raw, shelf=ref.shelf_name, book=ref.book_name, page=ref.page_name)


def _try_load(ref: PageRef, reader: FileReader) -> Material | PageError:
    try:
        return load_page(ref, reader)
    except PageError as e:
        return e


def flatten_with_report(catalog: Catalog, reader: FileReader, *, workers: int = 1) -> tuple[Store, FlattenReport]:
    """Flatten `catalog` into a Store, skipping pages that fail to load.

    With ``workers > 1`` pages are loaded on a thread pool; results are still
    inserted in document order, so a duplicate key keeps the last page in the
    catalog exactly as in the sequential walk.
    """
    refs = list(iter_pages(catalog))
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda r: _try_load(r, reader), refs))
    else:
        results = [_try_load(r, reader) for r in refs]

    store = Store()
    report = FlattenReport()
    for ref, result in zip(refs, results):
        if isinstance(result, PageError):
            logger.warning(f"Skipping page {ref.key}: {result}")
            report.skipped[ref.key] = str(result)
            continue
        if ref.key in store:
            logger.debug(f"Duplicate key {ref.key}; later page replaces earlier one")
            report.duplicates.append(ref.key)
        store.insert(ref.key, result)
        report.inserted.append(ref.key)

    logger.info(f"Flattened {len(refs)} pages: {len(store)} materials, {len(report.skipped)} skipped")
    return store, report


def flatten(catalog: Catalog, reader: FileReader, *, workers: int = 1) -> Store:
    """Flatten `catalog` into a Store. Never fails once the catalog is valid."""
    store, _ = flatten_with_report(catalog, reader, workers=workers)
    return store
