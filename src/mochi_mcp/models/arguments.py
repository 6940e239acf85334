"""
Typed argument models for the Mochi tools
Handlers build one of these from the raw argument bag before any upstream call
"""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

Number = Union[int, float]


class ToolArguments(BaseModel):
    """Base for the validated, immutable per-tool argument structs"""

    model_config = ConfigDict(frozen=True)


class ListDecksArguments(ToolArguments):
    pass


class ListCardsArguments(ToolArguments):
    deck_id: str
    page: Optional[Number] = None
    page_size: Optional[Number] = None
    bookmark: Optional[str] = None


class CreateCardArguments(ToolArguments):
    deck_id: str
    front: str
    back: str
    tags: Tuple[str, ...] = ()


class RecordReviewArguments(ToolArguments):
    card_id: str
    rating: str
