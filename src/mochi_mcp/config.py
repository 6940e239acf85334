#!/usr/bin/env python3
"""
Configuration and Mochi API Client for the MCP gateway
Contains the immutable settings object and the upstream HTTP client
"""

import base64
import json
import os
import logging
from typing import Any, Dict, Literal, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from .errors import ConfigurationError, ProtocolError, UpstreamError

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))
logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://app.mochi.cards/api"
AUTH_SCHEMES = ("basic", "bearer")
ERROR_BODY_LIMIT = 500


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_strict(text: Any) -> Any:
    """json.loads that refuses the non-standard NaN, Infinity and -Infinity tokens"""
    return json.loads(text, parse_constant=_reject_constant)


class Settings(BaseModel):
    """Process-wide configuration, built once at startup and never mutated"""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    auth_scheme: Literal["basic", "bearer"] = "basic"
    reviews_enabled: bool = False
    server_name: str = "mochi"
    server_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8787

    @property
    def has_key(self) -> bool:
        return bool(self.api_key)

    def __repr__(self) -> str:
        # Never render the credential
        return (
            f"Settings(api_base={self.api_base!r}, auth_scheme={self.auth_scheme!r}, "
            f"reviews_enabled={self.reviews_enabled}, has_key={self.has_key})"
        )

    __str__ = __repr__


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Build the settings object from the process environment"""
    auth_scheme = os.getenv("MOCHI_AUTH_SCHEME", "basic").strip().lower()
    if auth_scheme not in AUTH_SCHEMES:
        raise ConfigurationError(
            f"MOCHI_AUTH_SCHEME must be one of {', '.join(AUTH_SCHEMES)}, got '{auth_scheme}'"
        )

    settings = Settings(
        api_key=os.getenv("MOCHI_API_KEY") or None,
        api_base=os.getenv("MOCHI_API_BASE", DEFAULT_API_BASE),
        auth_scheme=auth_scheme,
        reviews_enabled=_env_flag("MOCHI_REVIEWS_ENABLED"),
        server_name=os.getenv("MCP_SERVER_NAME", "mochi"),
        server_version=os.getenv("MCP_SERVER_VERSION", "0.1.0"),
        host=os.getenv("MCP_SERVER_HOST", "0.0.0.0"),
        port=int(os.getenv("MCP_SERVER_PORT", "8787")),
    )

    if not settings.has_key:
        logger.warning("⚠️ MOCHI_API_KEY is not set - every tool call will fail until it is configured")

    return settings


class MochiClient:
    """HTTP client for the Mochi REST API, one request per call and no retries"""

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.base_url = settings.api_base.rstrip("/")
        self.client = http_client or httpx.AsyncClient()

    def require_credential(self) -> str:
        if not self.settings.api_key:
            raise ConfigurationError("MOCHI_API_KEY is not configured; refusing to call the Mochi API")
        return self.settings.api_key

    def _authorization(self) -> str:
        self.require_credential()

        if self.settings.auth_scheme == "bearer":
            return f"Bearer {self.settings.api_key}"

        # Mochi expects the key as the basic-auth user name with an empty password
        token = base64.b64encode(f"{self.settings.api_key}:".encode()).decode()
        return f"Basic {token}"

    async def call(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request to Mochi and return the parsed JSON body (None when empty)"""
        headers = {
            "Authorization": self._authorization(),
            "Accept": "application/json",
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        url = f"{self.base_url}{path}"
        logger.debug(f"Mochi request: {method} {path}")

        try:
            response = await self.client.request(method, url, headers=headers, params=params or None, json=body)
        except httpx.HTTPError as e:
            logger.warning(f"Mochi request {method} {path} failed before a response: {e}")
            raise UpstreamError(502, f"Mochi API request failed: {e}") from e

        text = response.text or ""
        if not 200 <= response.status_code < 300:
            snippet = text[:ERROR_BODY_LIMIT]
            logger.warning(f"Mochi API returned {response.status_code} for {method} {path}")
            raise UpstreamError(response.status_code, f"Mochi API {response.status_code}: {snippet}", snippet)

        if not text.strip():
            return None

        try:
            return loads_strict(text)
        except ValueError as e:
            raise ProtocolError(f"Failed to parse Mochi API response: {e}", text[:ERROR_BODY_LIMIT]) from e

    async def aclose(self) -> None:
        await self.client.aclose()
