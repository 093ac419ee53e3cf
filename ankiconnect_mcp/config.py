"""Конфигурация MCP-сервера и загрузка окружения."""

from __future__ import annotations

import os
from typing import Optional


ANKI_CONNECT_VERSION = 6


def _env_default(name: str, fallback: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return fallback
    trimmed = value.strip()
    return trimmed or fallback


def _env_optional(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _env_positive_float(name: str, fallback: float) -> float:
    raw = _env_optional(name)
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def reload_from_env() -> None:
    global ANKI_URL, REQUEST_TIMEOUT, LOG_LEVEL

    ANKI_URL = _env_default("ANKI_URL", "http://127.0.0.1:8765")
    REQUEST_TIMEOUT = _env_positive_float("ANKI_REQUEST_TIMEOUT", 30.0)
    LOG_LEVEL = _env_default("ANKI_MCP_LOG_LEVEL", "INFO").upper()


reload_from_env()


__all__ = [
    "ANKI_CONNECT_VERSION",
    "ANKI_URL",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
    "reload_from_env",
    "_env_default",
    "_env_optional",
]
