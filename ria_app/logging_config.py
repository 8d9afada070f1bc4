"""
Console logging for ``ria-app`` runs.

The library itself only creates module loggers under ``ria_app``; nothing is
configured on import. The CLI calls `setup_logging` once per run.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

PACKAGE_LOGGER = "ria_app"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Set on every handler this module installs so a second call replaces only those.
_OWNED = "_ria_app_owned"


def _as_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def setup_logging(
    level: int | str = "INFO",
    log_file: str | Path | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a console handler (stderr by default) to the package logger.

    `level` is a number or a level name. With `log_file` the same records are
    also written to that file, overwriting it. Calling again replaces the
    handlers installed by the previous call and leaves any others alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_as_level(level))
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)
    return logger
