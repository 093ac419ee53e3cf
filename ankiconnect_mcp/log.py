"""Настройка логирования для stdio-сервера."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from . import config


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Направляет логи пакета в stderr.

    stdout занят MCP-потоком, поэтому обработчик пишет только в stderr.
    Повторный вызов заменяет ранее установленный обработчик.
    """

    resolved = (level or config.LOG_LEVEL).upper()
    numeric = logging.getLevelName(resolved)
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logger = logging.getLogger("ankiconnect_mcp")
    for handler in list(logger.handlers):
        if getattr(handler, "_ankiconnect_mcp", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ankiconnect_mcp = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(numeric)
    logger.propagate = False
    return logger


__all__ = ["LOG_FORMAT", "configure_logging"]
