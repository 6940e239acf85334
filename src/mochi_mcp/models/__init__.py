"""
MCP Gateway Models Package
Contains request/response envelopes and typed tool arguments
"""

from .arguments import *
from .requests import *
from .responses import *

__all__ = [
    "ToolArguments",
    "ListDecksArguments",
    "ListCardsArguments",
    "CreateCardArguments",
    "RecordReviewArguments",
    "ToolCallParams",
    "SimpleRequest",
    "JsonRpcRequest",
    "SimpleResponse",
    "ToolCallResult",
    "JsonRpcError",
    "JsonRpcResponse",
]
