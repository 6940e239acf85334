"""
Tool Dispatcher for the Mochi MCP gateway
Resolves a tool name to its handler and runs it
"""

import enum
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from .config import MochiClient
from .errors import UnknownToolError, ValidationError
from .handlers import handle_create_card, handle_list_cards, handle_list_decks, handle_record_review

logger = logging.getLogger(__name__)

Handler = Callable[[MochiClient, Dict[str, Any]], Awaitable[Any]]


class ToolName(str, enum.Enum):
    LIST_DECKS = "list_decks"
    LIST_CARDS = "list_cards"
    CREATE_CARD = "create_card"
    RECORD_REVIEW = "record_review"

    @classmethod
    def parse(cls, name: Any) -> "ToolName":
        """Exact, case-sensitive lookup"""
        try:
            return cls(name)
        except ValueError:
            raise UnknownToolError(str(name)) from None


HANDLERS: Dict[ToolName, Handler] = {
    ToolName.LIST_DECKS: handle_list_decks,
    ToolName.LIST_CARDS: handle_list_cards,
    ToolName.CREATE_CARD: handle_create_card,
    ToolName.RECORD_REVIEW: handle_record_review,
}


class Dispatcher:
    """Stateless mapping from tool name to handler, bound to one upstream client"""

    def __init__(self, client: MochiClient, handlers: Optional[Dict[ToolName, Handler]] = None):
        self.client = client
        self.handlers = dict(handlers or HANDLERS)

    async def dispatch(self, tool_name: Any, arguments: Optional[Dict[str, Any]] = None, trace_id: str = None) -> Any:
        tool = ToolName.parse(tool_name)

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ValidationError(tool.value, "arguments", f"{tool.value} arguments must be an object")

        prefix = f"[TRACE:{trace_id}] " if trace_id else ""
        logger.info(f"{prefix}Executing tool: {tool.value} with argument keys: {sorted(arguments)}")

        return await self.handlers[tool](self.client, arguments)
