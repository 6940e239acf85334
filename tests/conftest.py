"""Shared fixtures: a settings object and a Mochi client whose transport is mocked."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from mochi_mcp.config import MochiClient, Settings
from tests.fixtures import DECKS_RESPONSE, make_response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", api_base="https://mochi.test/api")


@pytest.fixture
def http_client() -> MagicMock:
    """Stand-in for httpx.AsyncClient; tests override request.return_value / side_effect."""
    mock = MagicMock()
    mock.request = AsyncMock(return_value=make_response(200, json.dumps(DECKS_RESPONSE)))
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture
def client(settings, http_client) -> MochiClient:
    return MochiClient(settings, http_client=http_client)
