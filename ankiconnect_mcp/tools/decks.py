"""Инструменты Anki, связанные с колодами."""

from __future__ import annotations

from typing import Annotated, List

from fastmcp.tools.tool import ToolResult
from pydantic import Field

from .. import app
from ..schemas import CreateDeckResult, GetDecksResult, RenameDeckResult
from ..services import client as anki_client
from ._common import deck_query, output_schema, reported_as_tool_error, tool_result


@app.tool(
    name="get_decks",
    title="Get Decks",
    description="Get all deck names from Anki",
    output_schema=output_schema(GetDecksResult),
)
async def get_decks() -> ToolResult:
    with reported_as_tool_error("get_decks", "Failed to get decks"):
        raw_decks = await anki_client.anki_call("deckNames", {})
        decks: List[str] = list(raw_decks or [])
        output = GetDecksResult(decks=decks, total=len(decks))
    return tool_result(f"Found {output.total} decks", output)


@app.tool(
    name="create_deck",
    title="Create Deck",
    description="Create a new deck in Anki",
    output_schema=output_schema(CreateDeckResult),
)
async def create_deck(
    deck_name: Annotated[str, Field(description="Full deck name (use :: for nested decks)")],
) -> ToolResult:
    with reported_as_tool_error("create_deck", "Failed to create deck"):
        deck_id = await anki_client.anki_call("createDeck", {"deck": deck_name})
        output = CreateDeckResult(deck_id=deck_id, deck_name=deck_name)
    return tool_result(f"Created deck '{deck_name}' with ID: {deck_id}", output)


@app.tool(
    name="rename_deck",
    title="Rename Deck",
    description="Rename a deck in Anki",
    output_schema=output_schema(RenameDeckResult),
)
async def rename_deck(
    old_name: Annotated[str, Field(description="Current full deck name")],
    new_name: Annotated[str, Field(description="New full deck name")],
) -> ToolResult:
    """Переносит карточки в новую колоду и удаляет старую.

    Шаги выполняются последовательно и без отката: если удаление старой
    колоды не удалось, карточки уже перенесены, а пустая колода остаётся.
    """

    with reported_as_tool_error("rename_deck", "Failed to rename deck"):
        card_ids = await anki_client.anki_call("findCards", {"query": deck_query(old_name)})
        card_ids = list(card_ids or [])

        await anki_client.anki_call("createDeck", {"deck": new_name})

        if card_ids:
            await anki_client.anki_call("changeDeck", {"cards": card_ids, "deck": new_name})

        await anki_client.anki_call("deleteDecks", {"decks": [old_name], "cardsToo": True})

        output = RenameDeckResult(
            old_name=old_name,
            new_name=new_name,
            cards_moved=len(card_ids),
        )
    return tool_result(
        f"Renamed '{old_name}' to '{new_name}' ({output.cards_moved} cards moved)",
        output,
    )


__all__ = ["create_deck", "get_decks", "rename_deck"]
