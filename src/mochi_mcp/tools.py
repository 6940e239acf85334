"""
Tool Registry for the Mochi MCP gateway
Static catalogue of the tools exposed to MCP callers
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from mcp.types import Tool

REVIEW_RATINGS = ("again", "hard", "good", "easy")


@dataclass(frozen=True)
class ToolDefinition:
    """A named, schema-described tool. The schema is documentation only."""

    name: str
    description: str
    schema: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "schema": copy.deepcopy(self.schema),
        }

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=copy.deepcopy(self.schema))


_DECK_ID = {"type": "string", "description": "Deck identifier as returned by the `list_decks` tool."}

TOOLS: Tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list_decks",
        description="Fetch the list of decks available to the authenticated Mochi user.",
        schema={"type": "object", "properties": {}},
    ),
    ToolDefinition(
        name="list_cards",
        description="Fetch flashcards for a given deck. Supports optional pagination via `page` and `pageSize`.",
        schema={
            "type": "object",
            "properties": {
                "deckId": _DECK_ID,
                "page": {"type": "number", "description": "Optional page index (1-based)."},
                "pageSize": {"type": "number", "description": "Optional page size (upstream default applies when omitted)."},
                "bookmark": {"type": "string", "description": "Optional cursor returned by a previous `list_cards` call."},
            },
            "required": ["deckId"],
        },
    ),
    ToolDefinition(
        name="create_card",
        description=(
            "Create a new note/card inside the specified deck. "
            "Provide front/back markdown content and optional tags."
        ),
        schema={
            "type": "object",
            "properties": {
                "deckId": _DECK_ID,
                "front": {"type": "string", "description": "Front content in Markdown."},
                "back": {"type": "string", "description": "Back content in Markdown."},
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Optional list of tag strings to apply to the new card.",
                },
            },
            "required": ["deckId", "front", "back"],
        },
    ),
    ToolDefinition(
        name="record_review",
        description=(
            "Submit the result of a review for a specific card. "
            "Supports answering quality scores aligned with Mochi's API."
        ),
        schema={
            "type": "object",
            "properties": {
                "cardId": {"type": "string", "description": "Unique identifier of the card being reviewed."},
                "rating": {
                    "type": "string",
                    "enum": list(REVIEW_RATINGS),
                    "description": "Review rating aligned with Mochi's scheduler.",
                },
            },
            "required": ["cardId", "rating"],
        },
    ),
)


def list_tool_definitions() -> list:
    """Registry contents in the simple-protocol shape"""
    return [tool.to_dict() for tool in TOOLS]


def list_mcp_tools() -> list:
    """Registry contents in the JSON-RPC `tools/list` shape"""
    return [tool.to_mcp_tool().model_dump(by_alias=True, exclude_none=True) for tool in TOOLS]
