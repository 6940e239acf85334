"""
MCP Gateway Handlers Package
Contains one handler per Mochi tool, organised by resource
"""

from .deck_handlers import *
from .card_handlers import *
from .review_handlers import *

__all__ = [
    # Re-export all handler functions
    "handle_list_decks",
    "handle_list_cards",
    "handle_create_card",
    "handle_record_review",
]
