"""
Mochi MCP Gateway
Translates MCP tool calls into Mochi REST API requests
"""

__version__ = "0.1.0"
