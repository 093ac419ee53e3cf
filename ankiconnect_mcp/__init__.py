"""MCP-сервер, открывающий AnkiConnect как набор инструментов."""

from __future__ import annotations

from fastmcp import FastMCP


SERVER_NAME = "anki"
SERVER_VERSION = "1.0.0"

# Инициализация FastMCP-приложения доступна для импорта из пакета.
app = FastMCP(SERVER_NAME, version=SERVER_VERSION)


from . import tools  # noqa: E402 - регистрация инструментов
from . import config  # noqa: E402
from .errors import (  # noqa: E402
    AnkiMCPError,
    NotFoundError,
    RequestTimeoutError,
    TransportError,
    UpstreamError,
    ValidationError,
)


__all__ = [
    "AnkiMCPError",
    "NotFoundError",
    "RequestTimeoutError",
    "SERVER_NAME",
    "SERVER_VERSION",
    "TransportError",
    "UpstreamError",
    "ValidationError",
    "app",
    "config",
    "tools",
]
