"""Logging setup for the cutpy command line."""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["setup_logging", "resolve_level"]

_ENV_LEVEL = "CUTPY_LOG_LEVEL"


def resolve_level(verbose: bool = False) -> int:
    """DEBUG when verbose, else ``$CUTPY_LOG_LEVEL``, else WARNING."""

    if verbose:
        return logging.DEBUG
    name = os.environ.get(_ENV_LEVEL, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr; stdout carries only extracted output."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.basicConfig(level=level, handlers=[handler], force=True)
