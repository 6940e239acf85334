"""
Request models for the MCP gateway HTTP API
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel


class ToolCallParams(BaseModel):
    """`params` of a callTool / tools/call request"""
    name: Optional[Any] = None
    arguments: Optional[Any] = None


class SimpleRequest(BaseModel):
    """Envelope of the simple protocol: {method, params}"""
    method: Optional[str] = None
    params: Optional[Dict[str, Any]] = None


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request or notification"""
    jsonrpc: str = "2.0"
    id: Optional[Union[str, int]] = None
    method: str
    params: Optional[Dict[str, Any]] = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set
