"""Mock Mochi API payloads and response helpers."""

from __future__ import annotations

from unittest.mock import MagicMock

DECKS_RESPONSE = {
    "docs": [
        {"id": "deck-1", "name": "Spanish"},
        {"id": "deck-2", "name": "Biology"},
    ],
    "bookmark": "g1AAAA",
}

CARDS_RESPONSE = {
    "docs": [
        {"id": "card-1", "content": "hola\n\n---\n\nhello", "deck-id": "deck-1"},
    ],
    "bookmark": "g1BBBB",
}

CREATED_CARD_RESPONSE = {
    "id": "card-9",
    "content": "What is ATP?\n\n---\n\nThe energy currency of the cell",
    "deck-id": "deck-2",
    "manual-tags": ["biology"],
}


def make_response(status_code: int = 200, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response
