import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ankiconnect_mcp.errors import UpstreamError  # noqa: E402


class FakeAnkiConnect:
    """Упрощённая in-memory модель AnkiConnect для тестов инструментов.

    Для модели Basic у каждой заметки ровно одна карточка; поиск по
    `"deck:<name>"` сравнивает имя колоды целиком.
    """

    def __init__(self):
        self.decks: Dict[str, int] = {"Default": 1}
        self.notes: Dict[int, Dict[str, Any]] = {}
        self.cards: Dict[int, int] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.failures: Dict[str, str] = {}
        self._next_id = 1_700_000_000_000

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def add_deck(self, name: str) -> int:
        if name not in self.decks:
            self.decks[name] = self._new_id()
        return self.decks[name]

    def add_note(self, deck: str, front: Optional[str], back: Optional[str] = None) -> int:
        self.add_deck(deck)
        fields: Dict[str, str] = {}
        if front is not None:
            fields["Front"] = front
        if back is not None:
            fields["Back"] = back
        note_id = self._new_id()
        card_id = self._new_id()
        self.notes[note_id] = {"deck": deck, "model": "Basic", "fields": fields}
        self.cards[card_id] = note_id
        return note_id

    def cards_in(self, deck: str) -> List[int]:
        return [card_id for card_id, note_id in self.cards.items() if self.notes[note_id]["deck"] == deck]

    async def __call__(self, action, params=None, *, version=6):
        params = dict(params or {})
        self.calls.append((action, params))
        if action in self.failures:
            raise UpstreamError(self.failures[action])
        handler = getattr(self, f"_action_{action}", None)
        if handler is None:
            raise UpstreamError("unsupported action")
        return handler(**params)

    def _action_deckNames(self):
        return list(self.decks)

    def _action_createDeck(self, deck):
        return self.add_deck(deck)

    def _action_findCards(self, query):
        prefix = '"deck:'
        assert query.startswith(prefix) and query.endswith('"'), query
        return self.cards_in(query[len(prefix):-1])

    def _action_cardsInfo(self, cards):
        result = []
        for card_id in cards:
            note_id = self.cards[card_id]
            note = self.notes[note_id]
            result.append(
                {
                    "cardId": card_id,
                    "note": note_id,
                    "deckName": note["deck"],
                    "modelName": note["model"],
                    "fields": {
                        name: {"value": value, "order": order}
                        for order, (name, value) in enumerate(note["fields"].items())
                    },
                }
            )
        return result

    def _action_addNote(self, note):
        deck = note["deckName"]
        if deck not in self.decks:
            raise UpstreamError(f"deck was not found: {deck}")
        front = note["fields"].get("Front", "")
        allow_duplicate = note.get("options", {}).get("allowDuplicate", False)
        if not allow_duplicate:
            for existing in self.notes.values():
                if existing["deck"] == deck and existing["fields"].get("Front") == front:
                    raise UpstreamError("cannot create note because it is a duplicate")
        return self.add_note(deck, front, note["fields"].get("Back"))

    def _action_notesInfo(self, notes):
        result = []
        for note_id in notes:
            note = self.notes.get(note_id)
            if note is None:
                result.append({})
                continue
            result.append(
                {
                    "noteId": note_id,
                    "modelName": note["model"],
                    "fields": {
                        name: {"value": value, "order": order}
                        for order, (name, value) in enumerate(note["fields"].items())
                    },
                }
            )
        return result

    def _action_updateNoteFields(self, note):
        stored = self.notes.get(note["id"])
        if stored is None:
            raise UpstreamError(f"note was not found: {note['id']}")
        stored["fields"].update(note["fields"])
        return None

    def _action_changeDeck(self, cards, deck):
        self.add_deck(deck)
        for card_id in cards:
            self.notes[self.cards[card_id]]["deck"] = deck
        return None

    def _action_deleteDecks(self, decks, cardsToo=False):
        if not cardsToo:
            raise UpstreamError("cardsToo must be true")
        for name in decks:
            for card_id in self.cards_in(name):
                note_id = self.cards.pop(card_id)
                self.notes.pop(note_id, None)
            self.decks.pop(name, None)
        return None


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_anki(monkeypatch):
    fake = FakeAnkiConnect()
    monkeypatch.setattr("ankiconnect_mcp.services.client.anki_call", fake)
    return fake
