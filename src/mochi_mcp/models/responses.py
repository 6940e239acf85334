"""
Response models for the MCP gateway HTTP API
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel
from mcp.types import TextContent


class SimpleResponse(BaseModel):
    """Outer envelope of the simple protocol"""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None

    def to_body(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error}


class ToolCallResult(BaseModel):
    """Result of a JSON-RPC tools/call"""
    content: List[TextContent]
    structuredContent: Optional[Any] = None
    isError: bool = False

    def to_body(self) -> dict:
        return {
            "content": [item.model_dump(by_alias=True, exclude_none=True) for item in self.content],
            "structuredContent": self.structuredContent,
            "isError": self.isError,
        }


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class JsonRpcResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[Union[str, int]] = None
    result: Optional[Any] = None
    error: Optional[JsonRpcError] = None

    def to_body(self) -> dict:
        body = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            body["error"] = self.error.model_dump(exclude_none=True)
        else:
            body["result"] = self.result
        return body
