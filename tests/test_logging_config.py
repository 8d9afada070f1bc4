from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from ria_app.logging_config import setup_logging


def test_level_name_and_stream() -> None:
    buf = io.StringIO()
    logger = setup_logging("warning", stream=buf)
    assert logger.name == "ria_app"
    assert logger.level == logging.WARNING

    logging.getLogger("ria_app.orchestration.flatten").warning("Skipping page s:b:p")
    logging.getLogger("ria_app.orchestration.flatten").info("not shown")
    out = buf.getvalue()
    assert "WARNING ria_app.orchestration.flatten: Skipping page s:b:p" in out
    assert "not shown" not in out


def test_second_call_replaces_only_its_own_handlers() -> None:
    logger = logging.getLogger("ria_app")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)

    setup_logging(logging.INFO, stream=io.StringIO())
    setup_logging(logging.DEBUG, stream=io.StringIO())
    assert foreign in logger.handlers
    assert len(logger.handlers) == 2


def test_log_file_receives_records(tmp_path: Path) -> None:
    path = tmp_path / "build.log"
    setup_logging("INFO", log_file=path, stream=io.StringIO())
    logging.getLogger("ria_app.orchestration.build").info("Wrote 3 materials")
    for handler in logging.getLogger("ria_app").handlers:
        handler.flush()
    assert "Wrote 3 materials" in path.read_text(encoding="utf-8")


def test_unknown_level_name() -> None:
    with pytest.raises(ValueError):
        setup_logging("LOUD", stream=io.StringIO())
