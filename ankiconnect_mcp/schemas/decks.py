"""Pydantic-схемы результатов инструментов для колод."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class GetDecksResult(BaseModel):
    """Ответ инструмента `get_decks` в порядке, заданном Anki."""

    decks: List[str] = Field(default_factory=list)
    total: int


class CreateDeckResult(BaseModel):
    """Ответ инструмента `create_deck`."""

    deck_id: int = Field(alias="deckId")
    deck_name: str = Field(alias="deckName")

    model_config = ConfigDict(populate_by_name=True)


class RenameDeckResult(BaseModel):
    """Ответ инструмента `rename_deck`."""

    old_name: str = Field(alias="oldName")
    new_name: str = Field(alias="newName")
    cards_moved: int = Field(alias="cardsMoved")

    model_config = ConfigDict(populate_by_name=True)
