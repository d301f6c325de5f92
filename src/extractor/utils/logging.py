"""Logging utilities.

Loggers are namespaced under the ``extractor`` package logger.  The package
logger receives a :class:`logging.NullHandler` the first time a logger is
requested so that library use never prints unless the application configures
logging itself.  Configuration is idempotent.
"""

from __future__ import annotations

import logging

__all__ = ["PACKAGE_LOGGER", "get_logger", "configure_logging"]

PACKAGE_LOGGER = "extractor"

_configured = False


def _ensure_null_handler() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package namespace.

    ``name`` may be a dotted module name (``extractor.registry``) or a short
    suffix (``registry``); both resolve to ``extractor.registry``.
    """

    _ensure_null_handler()
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int) -> logging.Logger:
    """Set ``level`` on the package logger and return it."""

    logger = get_logger()
    logger.setLevel(level)
    return logger
