"""Logging utilities for gltfdoc.

Library code logs through the stdlib ``gltfdoc`` logger and never configures
it. :func:`configure_logging` (called by the CLI) routes records either to
the active reporter or, with ``use_rich``, to a ``rich`` log handler.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler

from .reporting import get_reporter

_LOGGER_NAME = "gltfdoc"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


class _ReporterHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        try:
            rep = get_reporter()
            msg = self.format(record)
            lvl = record.levelno
            if lvl >= logging.ERROR:
                rep.error(msg)
            elif lvl >= logging.WARNING:
                rep.warning(msg)
            elif lvl >= logging.INFO:
                rep.status(msg)
            else:
                rep.verbose(msg, level=1)
        except Exception:
            self.handleError(record)


def configure_logging(
    verbosity: int = 0, *, use_rich: Optional[bool] = False
) -> logging.Handler:
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbosity >= 1 else logging.INFO)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler: logging.Handler
    if use_rich:
        handler = RichHandler(show_path=verbosity >= 2, markup=False)
    else:
        handler = _ReporterHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return handler
