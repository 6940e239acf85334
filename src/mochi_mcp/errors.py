"""
Error taxonomy for the Mochi MCP gateway
Every failure a tool call can produce is one of these classes
"""

from typing import Optional


class GatewayError(Exception):
    """Base error for all classified gateway failures"""

    http_status = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(GatewayError):
    """Required configuration (the upstream credential) is missing or invalid"""


class ValidationError(GatewayError):
    """Caller-supplied tool arguments are missing or malformed"""

    http_status = 400

    def __init__(self, tool: str, field: str, message: str) -> None:
        self.tool = tool
        self.field = field
        super().__init__(message)


class UnknownToolError(GatewayError):
    """No handler is registered for the requested tool name"""

    http_status = 400

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class MethodNotFoundError(GatewayError):
    """The top-level protocol method is not recognised"""

    http_status = 404

    def __init__(self, method: Optional[str]) -> None:
        self.method = method
        super().__init__(f"Unsupported method: {method}")


class UpstreamError(GatewayError):
    """The Mochi API answered with a non-2xx status (or could not be reached)"""

    def __init__(self, status_code: int, message: str, raw_body: Optional[str] = None) -> None:
        self.status_code = status_code
        self.raw_body = raw_body
        super().__init__(message)

    @property
    def http_status(self) -> int:
        return self.status_code


class ProtocolError(GatewayError):
    """The Mochi API returned a success status with a body that is not JSON"""

    http_status = 502

    def __init__(self, message: str, raw_body: Optional[str] = None) -> None:
        self.raw_body = raw_body
        super().__init__(message)


class NotSupportedError(GatewayError):
    """The tool has no backing operation on the configured upstream"""

    http_status = 501

    def __init__(self, tool: str, message: str) -> None:
        self.tool = tool
        super().__init__(message)
