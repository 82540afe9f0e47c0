"""Structured JSON logger for seqdiff.

Every log record is emitted as a single-line JSON object::

    {"ts": "2026-10-18T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "seqdiff.differ", "message": "diff computed",
     "op": "diff", "old_size": 3, "new_size": 3, "move": 1}

Each engine module logs under its own child of ``seqdiff``, named after
the module (``seqdiff.differ`` for :mod:`seqdiff.engine.differ`), and
obtains it once at import time::

    from seqdiff.observability import get_logger

    log = get_logger("seqdiff.differ")

The differ writes one ``DEBUG`` summary per call and a ``WARNING`` when an
LCS table would exceed ``DiffConfig.lcs_max_cells``.  Child loggers start at
``WARNING`` and do not propagate, so callers opt in to the summaries per
module::

    logging.getLogger("seqdiff.differ").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Structured fields passed as
    ``extra={"extra_fields": {...}}`` are merged into the top level, and
    ``exc_info`` / ``stack_info`` are serialised when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name so that ``get_logger`` stays idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "seqdiff",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"seqdiff"``.  A bare module name such
        as ``"differ"`` is nested under ``seqdiff``.
    level:
        Minimum log level as an ``int`` or a case-insensitive string.
        Defaults to ``WARNING``; the differ's per-call summaries are
        emitted at ``DEBUG`` and only appear once the caller lowers it.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        Repeated calls with the same *name* return the same logger and do
        **not** add duplicate handlers.
    """
    if name != "seqdiff" and not name.startswith("seqdiff."):
        name = f"seqdiff.{name}"
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
