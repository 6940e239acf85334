"""
Review Handlers for the Mochi MCP gateway
"""

import logging
from typing import Any, Dict
from urllib.parse import quote

from ..config import MochiClient
from ..errors import NotSupportedError, ValidationError
from ..models import RecordReviewArguments
from ..tools import REVIEW_RATINGS
from ._validation import require_string

logger = logging.getLogger(__name__)


def parse_record_review_arguments(arguments: Dict[str, Any]) -> RecordReviewArguments:
    card_id = require_string("record_review", arguments, "cardId")
    rating = arguments.get("rating")
    if rating not in REVIEW_RATINGS:
        raise ValidationError(
            "record_review", "rating",
            f"record_review 'rating' must be one of {', '.join(REVIEW_RATINGS)}, got {rating!r}",
        )
    return RecordReviewArguments(card_id=card_id, rating=rating)


async def handle_record_review(client: MochiClient, arguments: Dict[str, Any]) -> Any:
    """Handle record_review tool"""
    args = parse_record_review_arguments(arguments)
    client.require_credential()

    if not client.settings.reviews_enabled:
        raise NotSupportedError(
            "record_review",
            "record_review is not supported: the Mochi API has no endpoint for recording reviews. "
            "Reviews must be answered in the Mochi app.",
        )

    return await client.call(f"/cards/{quote(args.card_id, safe='')}/reviews", "POST", body={"rating": args.rating})
