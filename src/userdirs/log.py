"""Logging for userdirs.

Library modules only create loggers; the CLI decides where output goes.
"""

from __future__ import annotations

import logging
import sys
import threading

ROOT = "userdirs"

_lock = threading.Lock()
_setup_done = False


class _StderrHandler(logging.StreamHandler):
    """Write to whatever ``sys.stderr`` is when a record is emitted."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


class _Formatter(logging.Formatter):
    """Format records as ``[tag] message``, dropping the ``userdirs.`` prefix."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(ROOT + "."):
            name = name[len(ROOT) + 1 :]
        record.msg = f"[{name}] {record.msg}"
        return super().format(record)


def setup_logging(verbose: bool = False) -> None:
    """Attach a single stderr handler to the ``userdirs`` logger (idempotent).

    Level is WARNING, or DEBUG when *verbose* is True. Calling again only
    adjusts the level.
    """
    global _setup_done
    with _lock:
        logger = logging.getLogger(ROOT)
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        if _setup_done:
            return
        handler = _StderrHandler()
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
        _setup_done = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT}.{name}")


logging.getLogger(ROOT).addHandler(logging.NullHandler())
