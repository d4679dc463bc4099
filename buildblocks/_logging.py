# buildblocks/_logging.py
"""
Loggers for the scanner and the document loader.

Both stay silent unless the caller passes a logger or `log=True`; with
`log=True` records go to a child of the `buildblocks` logger and the
application's logging configuration decides what is shown.
"""
from __future__ import annotations

import logging

LOGGER_NAME = "buildblocks"


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = debug


def resolve_logger(logger=None, *, enabled: bool = False, name: str | None = None):
    """
    The caller's `logger` if given, else `buildblocks.<name>` when `enabled`,
    else a NoopLogger.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
