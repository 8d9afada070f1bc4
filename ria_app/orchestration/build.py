from __future__ import annotations

import logging

from ria_app.adapters.codecs.registry import save_store
from ria_app.adapters.readers.local import LocalFileReader
from ria_app.config import BuildConfig
from ria_app.domain.catalog import load_catalog
from ria_app.domain.errors import CatalogReadError
from ria_app.orchestration.flatten import flatten
from ria_app.store.store import Store, read_key_list

__all__ = ["build_store", "run_build"]

logger = logging.getLogger(__name__)


def build_store(cfg: BuildConfig) -> Store:
    """Load the catalog, flatten it and apply the include/exclude key lists."""
    try:
        text = cfg.catalog.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogReadError(f"Cannot read catalog {cfg.catalog}: {e}") from e
    catalog = load_catalog(text)
    logger.info(f"Loaded catalog {cfg.catalog} ({len(catalog)} shelves)")

    reader = LocalFileReader(cfg.resolved_base_dir())
    store = flatten(catalog, reader, workers=cfg.workers)

    if cfg.include is not None:
        keep = read_key_list(cfg.include.read_text(encoding="utf-8"))
        store.retain_keys(keep)
        logger.info(f"Retained {len(store)} of {len(keep)} listed keys")
    if cfg.exclude is not None:
        drop = read_key_list(cfg.exclude.read_text(encoding="utf-8"))
        store.remove_many(drop)
        logger.info(f"Removed listed keys; {len(store)} materials remain")
    return store


def run_build(cfg: BuildConfig) -> Store:
    """build_store + persist with the configured codec."""
    codec = cfg.resolved_codec()
    store = build_store(cfg)
    path = save_store(store, cfg.output, codec)
    logger.info(f"Wrote {len(store)} materials to {path} ({codec.name})")
    return store
