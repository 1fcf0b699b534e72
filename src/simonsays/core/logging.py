# src/simonsays/core/logging.py
from __future__ import annotations

import logging
import sys


def configure_logging(level: int | str = logging.WARNING, json: bool = False) -> None:
    """
    Configure the root logger. Reports go to stdout, so logs go to stderr.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = [logging.StreamHandler(sys.stderr)]

    fmt = (
        '{"level":"%(levelname)s","time":"%(asctime)s","name":"%(name)s",'
        '"message":"%(message)s","module":"%(module)s","line":%(lineno)d}'
        if json
        else "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )
    # force: each CLI invocation rebinds to the current stderr
    logging.basicConfig(level=level, handlers=handlers, format=fmt, force=True)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "simonsays")
