"""
Manifest Builder for the Mochi MCP gateway
Static discovery document served at /.well-known/mcp.json
"""

from typing import Any, Dict

from .config import Settings
from .tools import list_tool_definitions

SERVICE_DESCRIPTION = "Remote MCP server backed by the Mochi spaced-repetition API."
REQUIRED_VARIABLES = ["MOCHI_API_KEY"]

_AUTH_INSTRUCTIONS = {
    "basic": "Set the MOCHI_API_KEY secret to a Mochi API key; it is sent as the HTTP Basic user name.",
    "bearer": "Set the MOCHI_API_KEY secret to a Mochi personal access token.",
}


def build_manifest(settings: Settings) -> Dict[str, Any]:
    return {
        "name": settings.server_name,
        "version": settings.server_version,
        "description": SERVICE_DESCRIPTION,
        "capabilities": {
            "tools": list_tool_definitions(),
        },
        "auth": {
            "type": settings.auth_scheme,
            "instructions": _AUTH_INSTRUCTIONS[settings.auth_scheme],
        },
        "environment": {
            "variables": list(REQUIRED_VARIABLES),
        },
    }
