"""
Deck Handlers for the Mochi MCP gateway
"""

import logging
from typing import Any, Dict

from ..config import MochiClient
from ..models import ListDecksArguments

logger = logging.getLogger(__name__)


def parse_list_decks_arguments(arguments: Dict[str, Any]) -> ListDecksArguments:
    return ListDecksArguments()


async def handle_list_decks(client: MochiClient, arguments: Dict[str, Any]) -> Any:
    """Handle list_decks tool"""
    parse_list_decks_arguments(arguments)
    return await client.call("/decks/", "GET")
