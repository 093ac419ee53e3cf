"""Pydantic-схемы результатов инструментов для карточек."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CardSummary(BaseModel):
    """Лицевая и оборотная стороны карточки."""

    note_id: int = Field(alias="noteId")
    front: str = ""
    back: str = ""

    model_config = ConfigDict(populate_by_name=True)


class ListCardsResult(BaseModel):
    cards: List[CardSummary] = Field(default_factory=list)
    total: int = 0


class CreateCardResult(BaseModel):
    note_id: int = Field(alias="noteId")
    deck_name: str = Field(alias="deckName")

    model_config = ConfigDict(populate_by_name=True)


class UpdateCardResult(BaseModel):
    note_id: int = Field(alias="noteId")
    updated: bool = True

    model_config = ConfigDict(populate_by_name=True)
