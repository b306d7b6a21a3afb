"""Logging setup shared by the CLI and the server."""

from __future__ import annotations

import logging

from md2page.config import MD2PAGE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = MD2PAGE_LOG_LEVEL) -> None:
    """Attach a stderr handler to the root logger unless one is configured, then set the level."""
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger().setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
