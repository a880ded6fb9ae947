"""Pytest configuration and fixtures for x402-scraper-mcp tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from x402_scraper_mcp.config import ScraperApiConfig
from x402_scraper_mcp.metrics import ServerMetrics
from x402_scraper_mcp.providers import ApiResponse


def make_challenge(resource: str | None = "https://api.example.com/paid") -> dict[str, Any]:
    """Build an x402 challenge payload."""
    option: dict[str, Any] = {"scheme": "exact", "network": "base-sepolia"}
    if resource is not None:
        option["resource"] = resource
    return {"x402Version": 1, "error": "Payment required", "accepts": [option]}


def api_response(payload: Any, status_code: int = 200) -> ApiResponse:
    """Wrap a payload in an ApiResponse."""
    return ApiResponse(url="http://localhost:8080", status_code=status_code, payload=payload)


@pytest.fixture
def config() -> ScraperApiConfig:
    """Configuration pointing at a fake API."""
    return ScraperApiConfig(base_url="http://scraper.test")


@pytest.fixture
def challenge() -> dict[str, Any]:
    """A payable x402 challenge."""
    return make_challenge()


@pytest.fixture
def provider() -> Mock:
    """A provider whose calls are AsyncMocks."""
    mock_provider = Mock()
    mock_provider.get_json = AsyncMock()
    mock_provider.post_json = AsyncMock()
    mock_provider.post = AsyncMock(return_value=api_response(None))
    return mock_provider


@pytest.fixture(autouse=True)
def fresh_metrics(monkeypatch: pytest.MonkeyPatch) -> ServerMetrics:
    """Give every test its own metrics instance."""
    metrics = ServerMetrics()
    monkeypatch.setattr("x402_scraper_mcp.metrics._metrics", metrics)
    return metrics
