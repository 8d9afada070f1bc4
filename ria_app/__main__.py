from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from ria_app.adapters.codecs.registry import list_codecs
from ria_app.config import BuildConfig
from ria_app.domain.errors import RiaError
from ria_app.logging_config import setup_logging
from ria_app.orchestration.build import run_build


def parse_args(argv: Sequence[str] | None = None) -> BuildConfig:
    parser = argparse.ArgumentParser(
        prog="ria_app",
        description="Flatten a refractiveindex.info catalog into a key-value store of materials.",
    )
    parser.add_argument("-i", "--input", type=Path, default=Path("./catalog-nk.yml"), help="catalog file")
    parser.add_argument("-o", "--output", type=Path, default=Path("./results.json"), help="store file to write")
    parser.add_argument("-f", "--format", choices=list_codecs(), default=None, help="store encoding (default: from suffix)")
    parser.add_argument("--base-dir", type=Path, default=None, help="database root (default: catalog directory)")
    parser.add_argument("--include", type=Path, default=None, help="file with keys to keep, one per line")
    parser.add_argument("--exclude", type=Path, default=None, help="file with keys to drop, one per line")
    parser.add_argument("-j", "--workers", type=int, default=1, help="threads used to load pages")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    try:
        return BuildConfig(
            catalog=args.input,
            output=args.output,
            format=args.format,
            base_dir=args.base_dir,
            include=args.include,
            exclude=args.exclude,
            workers=args.workers,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry."""
    cfg = parse_args(argv)
    setup_logging(cfg.log_level)
    try:
        run_build(cfg)
    except (RiaError, KeyError, OSError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
