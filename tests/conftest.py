from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from ria_app.domain.models import Formula2, Material, TabulatedK, TabulatedNK
from samples import CATALOG_YML, MATERIAL_FILES


@pytest.fixture()
def database(tmp_path: Path) -> Path:
    """On-disk database root holding catalog-nk.yml and the sample material files."""
    root = tmp_path / "database"
    for rel, text in MATERIAL_FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (root / "catalog-nk.yml").write_text(CATALOG_YML, encoding="utf-8")
    return root


@pytest.fixture()
def bk7() -> Material:
    return Material(
        shelf="GLASS - popular glass types",
        book="SCHOTT - BK",
        page="N-BK7 (SCHOTT)",
        comments="lead containing glass type",
        references="SCHOTT Zemax catalog 2017-01-20b",
        data=(
            Formula2(
                wavelength_range=(0.3, 2.5),
                c=(0.0, 1.03961212, 0.00600069867, 0.231792344, 0.0200179144, 1.01046945, 103.560653),
            ),
            TabulatedK(data=((0.37, 5.4237e-06), (0.38, 2.7852e-06))),
        ),
    )


@pytest.fixture()
def silver() -> Material:
    return Material(
        shelf="MAIN - simple inorganic materials",
        book="Ag (Silver)",
        page="Johnson and Christy 1972",
        data=(TabulatedNK(data=((0.1879, 1.07, 1.212), (0.1916, 1.10, 1.232))),),
    )


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """The CLI installs handlers on the 'ria_app' logger; drop them between tests."""
    yield
    logger = logging.getLogger("ria_app")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
