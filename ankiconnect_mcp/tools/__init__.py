"""Пакет с MCP-инструментами."""

from .cards import create_card, list_cards, update_card
from .decks import create_deck, get_decks, rename_deck


__all__ = [
    "create_card",
    "create_deck",
    "get_decks",
    "list_cards",
    "rename_deck",
    "update_card",
]
