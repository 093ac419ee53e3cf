"""Публичный интерфейс схем MCP-сервера."""

from .cards import CardSummary, CreateCardResult, ListCardsResult, UpdateCardResult
from .decks import CreateDeckResult, GetDecksResult, RenameDeckResult


__all__ = [
    "CardSummary",
    "CreateCardResult",
    "CreateDeckResult",
    "GetDecksResult",
    "ListCardsResult",
    "RenameDeckResult",
    "UpdateCardResult",
]
