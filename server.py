"""Тонкий фасад: точка входа `fastmcp run server.py:app` и реэкспорт инструментов."""

from __future__ import annotations

from ankiconnect_mcp import app
from ankiconnect_mcp import config as _config
from ankiconnect_mcp.errors import (
    AnkiMCPError,
    NotFoundError,
    RequestTimeoutError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from ankiconnect_mcp.schemas import (
    CardSummary,
    CreateCardResult,
    CreateDeckResult,
    GetDecksResult,
    ListCardsResult,
    RenameDeckResult,
    UpdateCardResult,
)
from ankiconnect_mcp.services import client as anki_client
from ankiconnect_mcp.tools import (
    create_card,
    create_deck,
    get_decks,
    list_cards,
    rename_deck,
    update_card,
)

_config.reload_from_env()

_CONFIG_EXPORTS = {
    "ANKI_URL",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
}


def __getattr__(name: str):
    if name in _CONFIG_EXPORTS:
        return getattr(_config, name)
    raise AttributeError(f"module 'server' has no attribute {name!r}")


def __dir__():
    return sorted(set(globals()) | _CONFIG_EXPORTS)


anki_call = anki_client.anki_call

__all__ = [
    "ANKI_URL",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
    "AnkiMCPError",
    "CardSummary",
    "CreateCardResult",
    "CreateDeckResult",
    "GetDecksResult",
    "ListCardsResult",
    "NotFoundError",
    "RenameDeckResult",
    "RequestTimeoutError",
    "TransportError",
    "UpdateCardResult",
    "UpstreamError",
    "ValidationError",
    "anki_call",
    "app",
    "create_card",
    "create_deck",
    "get_decks",
    "list_cards",
    "rename_deck",
    "update_card",
]
