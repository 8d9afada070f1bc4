from __future__ import annotations

from pathlib import Path

import pytest

from ria_app.__main__ import main, parse_args
from ria_app.adapters.codecs.registry import load_store, make_codec
from ria_app.config import BuildConfig
from ria_app.domain.errors import CatalogReadError, CatalogStructureError
from ria_app.orchestration.build import build_store, run_build

from samples import GOOD_KEYS


def test_config_defaults(database: Path) -> None:
    cfg = BuildConfig(catalog=database / "catalog-nk.yml", output=database / "out.yaml")
    assert cfg.resolved_base_dir() == database
    assert cfg.resolved_codec().name == "yaml"
    assert BuildConfig(output=Path("x.json"), format="binary").resolved_codec().name == "binary"


def test_run_build_writes_store(database: Path, tmp_path: Path) -> None:
    out = tmp_path / "results.json"
    store = run_build(BuildConfig(catalog=database / "catalog-nk.yml", output=out))
    assert set(store.keys()) == GOOD_KEYS
    assert load_store(out).model_dump() == store.model_dump()


def test_include_and_exclude_lists(database: Path, tmp_path: Path) -> None:
    include = tmp_path / "include.txt"
    include.write_text("main:Ag:Johnson\nmain:Ag:Choi\nglass:SCHOTT-BK:N-BK7\n", encoding="utf-8")
    exclude = tmp_path / "exclude.txt"
    exclude.write_text("main:Ag:Choi\n", encoding="utf-8")
    cfg = BuildConfig(catalog=database / "catalog-nk.yml", output=tmp_path / "o.json", include=include, exclude=exclude)
    store = build_store(cfg)
    assert set(store.keys()) == {"main:Ag:Johnson", "glass:SCHOTT-BK:N-BK7"}


def test_missing_catalog_is_a_read_error(tmp_path: Path) -> None:
    with pytest.raises(CatalogReadError) as info:
        build_store(BuildConfig(catalog=tmp_path / "nope.yml"))
    assert not isinstance(info.value, CatalogStructureError)
    assert "Cannot read catalog" in str(info.value)


def test_cli_binary_output(database: Path, tmp_path: Path) -> None:
    out = tmp_path / "results.store"
    code = main(["-i", str(database / "catalog-nk.yml"), "-o", str(out), "-f", "binary", "-j", "2", "--log-level", "ERROR"])
    assert code == 0
    store = make_codec("binary").loads(out.read_bytes())
    assert set(store.keys()) == GOOD_KEYS


def test_cli_reports_bad_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    catalog = tmp_path / "catalog-nk.yml"
    catalog.write_text("SHELF: not-a-list\n", encoding="utf-8")
    code = main(["-i", str(catalog), "-o", str(tmp_path / "r.json"), "--log-level", "ERROR"])
    assert code == 1
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "r.json").exists()


def test_cli_rejects_zero_workers() -> None:
    with pytest.raises(SystemExit):
        parse_args(["-j", "0"])
