#!/usr/bin/env python3
"""
MCP Gateway for the Mochi flashcard API
Exposes Mochi operations as MCP tools over HTTP

Speaks two envelopes: the simple {method, params} protocol on POST /
and JSON-RPC 2.0 ("Streamable HTTP", single JSON response) on POST /mcp
"""

import json
import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    LATEST_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    Implementation,
    InitializeResult,
    ServerCapabilities,
    TextContent,
    ToolsCapability,
)
from pydantic import ValidationError as PydanticValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from .config import MochiClient, Settings, load_settings, loads_strict
from .dispatcher import Dispatcher
from .errors import GatewayError, MethodNotFoundError, ValidationError
from .manifest import build_manifest
from .models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    SimpleRequest,
    SimpleResponse,
    ToolCallParams,
    ToolCallResult,
)
from .tools import list_mcp_tools, list_tool_definitions

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Answers every preflight and stamps permissive CORS headers on every response, errors included"""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        for key, value in CORS_HEADERS.items():
            response.headers[key] = value
        return response


class DistributedTracingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Extract trace ID from incoming request or generate new one
        trace_id = request.headers.get("X-Trace-ID") or str(uuid.uuid4())
        request.state.trace_id = trace_id

        logger.info(f"[TRACE:{trace_id}] MCP gateway request: {request.method} {request.url.path}")

        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id

        logger.info(f"[TRACE:{trace_id}] MCP gateway response: {response.status_code}")

        return response


def _simple_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(SimpleResponse(success=False, error=message).to_body(), status_code=status_code)


def _rpc_error(request_id: Any, code: int, message: str, status_code: int) -> JSONResponse:
    body = JsonRpcResponse(id=request_id, error=JsonRpcError(code=code, message=message)).to_body()
    return JSONResponse(body, status_code=status_code)


def _rpc_result(request_id: Any, result: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(JsonRpcResponse(id=request_id, result=result).to_body(), status_code=status_code)


def _tool_call_body(result: Any, is_error: bool = False, message: Optional[str] = None) -> Dict[str, Any]:
    text = message if is_error else json.dumps(result, indent=2)
    return ToolCallResult(
        content=[TextContent(type="text", text=text)],
        structuredContent=result,
        isError=is_error,
    ).to_body()


async def _read_json(request: Request) -> Any:
    """Parse the request body; raises ValueError when it is not strict JSON"""
    raw = await request.body()
    return loads_strict(raw)


def _parse_tool_call(params: Any, method: str) -> ToolCallParams:
    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise ValidationError(method, "params", f"{method} params must be an object")

    call = ToolCallParams.model_validate(params)
    if not isinstance(call.name, str) or not call.name:
        raise ValidationError(method, "name", "Tool invocation missing name")
    return call


async def handle_simple_invocation(
    dispatcher: Dispatcher, envelope: SimpleRequest, trace_id: str = None
) -> Dict[str, Any]:
    """Run one simple-protocol request and return the `data` payload"""
    if envelope.method == "listTools":
        return {"tools": list_tool_definitions()}

    if envelope.method == "callTool":
        call = _parse_tool_call(envelope.params, "callTool")
        result = await dispatcher.dispatch(call.name, call.arguments, trace_id=trace_id)
        return {"result": result}

    raise MethodNotFoundError(envelope.method)


def _initialize_result(settings: Settings, params: Dict[str, Any]) -> Dict[str, Any]:
    protocol_version = params.get("protocolVersion")
    if not isinstance(protocol_version, str):
        protocol_version = LATEST_PROTOCOL_VERSION

    result = InitializeResult(
        protocolVersion=protocol_version,
        capabilities=ServerCapabilities(tools=ToolsCapability(listChanged=False)),
        serverInfo=Implementation(name=settings.server_name, version=settings.server_version),
    )
    return result.model_dump(by_alias=True, exclude_none=True)


def create_app(settings: Optional[Settings] = None, client: Optional[MochiClient] = None) -> FastAPI:
    """Build the gateway application around one settings object and one upstream client"""
    settings = settings or load_settings()
    client = client or MochiClient(settings)
    dispatcher = Dispatcher(client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting MCP gateway: {settings.server_name} v{settings.server_version}")
        logger.info(f"Forwarding to Mochi API at: {settings.api_base} ({settings.auth_scheme} auth)")
        yield
        await client.aclose()

    app = FastAPI(
        title="Mochi MCP Gateway",
        description="MCP tools backed by the Mochi spaced-repetition API",
        version=settings.server_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dispatcher = dispatcher

    # Last added runs outermost, so CORS headers cover tracing too
    app.add_middleware(DistributedTracingMiddleware)
    app.add_middleware(CorsHeadersMiddleware)

    @app.get("/.well-known/mcp.json")
    async def well_known_manifest():
        """Discovery document, no authentication required"""
        return build_manifest(settings)

    @app.get("/")
    async def root_manifest():
        return build_manifest(settings)

    @app.get("/health")
    async def health_check():
        return {"ok": True, "hasKey": settings.has_key}

    @app.post("/")
    async def simple_endpoint(request: Request):
        """Simple protocol: {"method": "listTools" | "callTool", "params": {...}}"""
        trace_id = getattr(request.state, "trace_id", None)

        try:
            payload = await _read_json(request)
        except ValueError as e:
            return _simple_error(f"Invalid JSON payload: {e}", 400)

        try:
            envelope = SimpleRequest.model_validate(payload)
        except PydanticValidationError:
            return _simple_error("Invalid JSON payload: expected an object with a string 'method'", 400)

        try:
            data = await handle_simple_invocation(dispatcher, envelope, trace_id)
        except MethodNotFoundError as e:
            return _simple_error(e.message, 404)
        except GatewayError as e:
            logger.info(f"[TRACE:{trace_id}] {type(e).__name__}: {e.message}")
            return _simple_error(e.message, 400)
        except Exception:
            logger.exception(f"[TRACE:{trace_id}] Unexpected error handling {envelope.method}")
            return _simple_error("Internal server error", 500)

        return JSONResponse(SimpleResponse(success=True, data=data).to_body())

    @app.post("/mcp")
    async def jsonrpc_endpoint(request: Request):
        """JSON-RPC 2.0: initialize, ping, tools/list, tools/call"""
        trace_id = getattr(request.state, "trace_id", None)

        try:
            payload = await _read_json(request)
        except ValueError as e:
            return _rpc_error(None, INVALID_REQUEST, f"Parse error: {e}", 400)

        try:
            rpc = JsonRpcRequest.model_validate(payload)
        except PydanticValidationError:
            request_id = payload.get("id") if isinstance(payload, dict) else None
            if not isinstance(request_id, (str, int)) or isinstance(request_id, bool):
                request_id = None
            return _rpc_error(request_id, INVALID_REQUEST, "Invalid Request", 400)

        if rpc.is_notification:
            logger.debug(f"[TRACE:{trace_id}] Notification received: {rpc.method}")
            return Response(status_code=202)

        params = rpc.params or {}

        if rpc.method == "initialize":
            return _rpc_result(rpc.id, _initialize_result(settings, params))

        if rpc.method == "ping":
            return _rpc_result(rpc.id, {})

        if rpc.method == "tools/list":
            return _rpc_result(rpc.id, {"tools": list_mcp_tools()})

        if rpc.method != "tools/call":
            return _rpc_error(rpc.id, METHOD_NOT_FOUND, f"Method not found: {rpc.method}", 404)

        try:
            call = _parse_tool_call(params, "tools/call")
        except ValidationError as e:
            return _rpc_error(rpc.id, INVALID_PARAMS, e.message, 400)

        try:
            result = await dispatcher.dispatch(call.name, call.arguments, trace_id=trace_id)
        except GatewayError as e:
            logger.info(f"[TRACE:{trace_id}] {type(e).__name__}: {e.message}")
            return _rpc_result(rpc.id, _tool_call_body(None, is_error=True, message=e.message), e.http_status)
        except Exception:
            logger.exception(f"[TRACE:{trace_id}] Unexpected error calling tool {call.name}")
            return _rpc_error(rpc.id, INTERNAL_ERROR, "Internal error", 500)

        return _rpc_result(rpc.id, _tool_call_body(result))

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    async def not_found(path: str):
        return Response("Not Found", status_code=404)

    return app


async def main():
    """Main function to start the MCP gateway"""
    import uvicorn

    settings = load_settings()
    app = create_app(settings)

    logger.info(f"🚀 Starting MCP gateway on {settings.host}:{settings.port}")
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level="info")
    server_instance = uvicorn.Server(config)
    await server_instance.serve()
