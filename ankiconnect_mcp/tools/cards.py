"""Инструменты Anki для просмотра и редактирования карточек."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Mapping, Optional

from fastmcp.tools.tool import ToolResult
from pydantic import Field

from .. import app
from ..errors import NotFoundError, ValidationError
from ..schemas import CardSummary, CreateCardResult, ListCardsResult, UpdateCardResult
from ..services import client as anki_client
from ._common import deck_query, output_schema, reported_as_tool_error, tool_result


BASIC_MODEL = "Basic"
DEFAULT_LIST_LIMIT = 50


def _field_value(fields: Any, name: str) -> Optional[str]:
    if not isinstance(fields, Mapping):
        return None
    entry = fields.get(name)
    if isinstance(entry, Mapping):
        value = entry.get("value")
        return value if isinstance(value, str) else None
    return None


@app.tool(
    name="list_cards",
    title="List Cards",
    description="List cards in a deck with their front/back content",
    output_schema=output_schema(ListCardsResult),
)
async def list_cards(
    deck_name: Annotated[str, Field(description="Full deck name (e.g., 'Italian::Chapter 1')")],
    limit: Annotated[
        int, Field(ge=0, description="Maximum number of cards to return")
    ] = DEFAULT_LIST_LIMIT,
) -> ToolResult:
    with reported_as_tool_error("list_cards", "Failed to list cards"):
        card_ids = await anki_client.anki_call("findCards", {"query": deck_query(deck_name)})
        if not card_ids:
            return tool_result("No cards found in this deck.", ListCardsResult(cards=[], total=0))

        limited_ids = list(card_ids)[:limit]
        raw_cards = await anki_client.anki_call("cardsInfo", {"cards": limited_ids})

        cards: List[CardSummary] = []
        for raw_card in raw_cards or []:
            fields = raw_card.get("fields")
            cards.append(
                CardSummary(
                    note_id=raw_card["note"],
                    front=_field_value(fields, "Front") or "",
                    back=_field_value(fields, "Back") or "",
                )
            )
        output = ListCardsResult(cards=cards, total=len(cards))
    return tool_result(f"Found {output.total} cards", output)


@app.tool(
    name="create_card",
    title="Create Card",
    description="Create a new basic card in Anki",
    output_schema=output_schema(CreateCardResult),
)
async def create_card(
    deck_name: Annotated[str, Field(description="The deck to add the card to")],
    front: Annotated[str, Field(description="Front side content")],
    back: Annotated[str, Field(description="Back side content")],
) -> ToolResult:
    with reported_as_tool_error("create_card", "Failed to create card"):
        note_id = await anki_client.anki_call(
            "addNote",
            {
                "note": {
                    "deckName": deck_name,
                    "modelName": BASIC_MODEL,
                    "fields": {"Front": front, "Back": back},
                    # AnkiConnect отклоняет дубликаты при allowDuplicate=False.
                    "options": {"allowDuplicate": False},
                }
            },
        )
        output = CreateCardResult(note_id=note_id, deck_name=deck_name)
    return tool_result(f"Created card with note ID: {note_id}", output)


@app.tool(
    name="update_card",
    title="Update Card",
    description="Update an existing card's content",
    output_schema=output_schema(UpdateCardResult),
)
async def update_card(
    note_id: Annotated[int, Field(description="The note ID to update")],
    front: Annotated[Optional[str], Field(description="New front content")] = None,
    back: Annotated[Optional[str], Field(description="New back content")] = None,
) -> ToolResult:
    """Обновляет поля Front/Back заметки.

    Чтение и запись выполняются двумя отдельными вызовами без проверки
    версии: правка, сделанная между ними в Anki, будет перезаписана.
    """

    with reported_as_tool_error("update_card", "Failed to update card"):
        if front is None and back is None:
            raise ValidationError("Provide at least 'front' or 'back' to update.")

        notes = await anki_client.anki_call("notesInfo", {"notes": [note_id]})
        current = notes[0] if notes else None
        if not current:
            raise NotFoundError(f"Note {note_id} not found.")

        current_fields = current.get("fields")
        fields: Dict[str, str] = {
            "Front": front if front is not None else (_field_value(current_fields, "Front") or ""),
            "Back": back if back is not None else (_field_value(current_fields, "Back") or ""),
        }

        await anki_client.anki_call(
            "updateNoteFields", {"note": {"id": note_id, "fields": fields}}
        )
        output = UpdateCardResult(note_id=note_id, updated=True)
    return tool_result(f"Updated note {note_id}", output)


__all__ = ["create_card", "list_cards", "update_card"]
