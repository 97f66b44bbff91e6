"""Logging utilities for rustdocstring commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "rustdocstring"
_ANALYZER_PREFIX = f"{_LOGGER_NAME}.analyzers."

CONSOLE_FORMAT = "[rustdocstring] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s [%(item_kind)s] %(name)s: %(message)s"


class ItemKindFilter(logging.Filter):
    """Tag each record with the item kind it concerns.

    Records may carry ``item_kind`` through ``extra``; analyzer loggers
    (``rustdocstring.analyzers.<kind>``) get it from their name, and
    everything else is tagged ``-``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "item_kind", None):
            if record.name.startswith(_ANALYZER_PREFIX):
                record.item_kind = record.name[len(_ANALYZER_PREFIX) :]
            else:
                record.item_kind = "-"
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the rustdocstring hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure console output and an optional file sink tagged by item kind."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.addFilter(ItemKindFilter())
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["ItemKindFilter", "configure_logging", "get_logger"]
