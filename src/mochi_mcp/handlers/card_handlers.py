"""
Card Handlers for the Mochi MCP gateway
Handles listing and creating cards inside a deck
"""

import logging
from typing import Any, Dict

from ..config import MochiClient
from ..errors import ValidationError
from ..models import CreateCardArguments, ListCardsArguments
from ._validation import is_number, require_string

logger = logging.getLogger(__name__)

# Mochi stores a card as a single markdown document; this rule splits the sides
CARD_SIDE_SEPARATOR = "\n\n---\n\n"


def parse_list_cards_arguments(arguments: Dict[str, Any]) -> ListCardsArguments:
    """Only deckId is strict; malformed paging values are dropped, not rejected"""
    deck_id = require_string("list_cards", arguments, "deckId")

    page = arguments.get("page")
    page_size = arguments.get("pageSize")
    bookmark = arguments.get("bookmark")

    return ListCardsArguments(
        deck_id=deck_id,
        page=page if is_number(page) else None,
        page_size=page_size if is_number(page_size) else None,
        bookmark=bookmark if isinstance(bookmark, str) and bookmark else None,
    )


def parse_create_card_arguments(arguments: Dict[str, Any]) -> CreateCardArguments:
    deck_id = require_string("create_card", arguments, "deckId")
    front = require_string("create_card", arguments, "front")
    back = require_string("create_card", arguments, "back")

    tags = arguments.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, list):
        raise ValidationError("create_card", "tags", "create_card 'tags' must be an array of strings if provided")
    for tag in tags:
        if not isinstance(tag, str):
            raise ValidationError("create_card", "tags", f"create_card 'tags' must only contain strings, got {tag!r}")

    return CreateCardArguments(deck_id=deck_id, front=front, back=back, tags=tuple(tags))


async def handle_list_cards(client: MochiClient, arguments: Dict[str, Any]) -> Any:
    """Handle list_cards tool"""
    args = parse_list_cards_arguments(arguments)

    params: Dict[str, Any] = {"deck-id": args.deck_id}
    if args.page_size is not None:
        params["limit"] = args.page_size
    if args.page is not None:
        params["page"] = args.page
    if args.bookmark is not None:
        params["bookmark"] = args.bookmark

    return await client.call("/cards/", "GET", params=params)


async def handle_create_card(client: MochiClient, arguments: Dict[str, Any]) -> Any:
    """Handle create_card tool - front and back are joined into one markdown body"""
    args = parse_create_card_arguments(arguments)

    body = {
        "content": f"{args.front}{CARD_SIDE_SEPARATOR}{args.back}",
        "deck-id": args.deck_id,
        "manual-tags": list(args.tags),
    }

    result = await client.call("/cards/", "POST", body=body)
    logger.info(f"Created card in deck {args.deck_id}")
    return result
