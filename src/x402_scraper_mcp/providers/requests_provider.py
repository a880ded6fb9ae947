"""Scraping API transport built on the requests library."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests

from x402_scraper_mcp.config import ScraperApiConfig
from x402_scraper_mcp.metrics import record_request
from x402_scraper_mcp.providers.base import ApiResponse, ScraperApiProvider

logger = logging.getLogger(__name__)


class RequestsProvider(ScraperApiProvider):
    """Calls the scraping API with a shared requests session.

    Requests are made without any retry of their own and whatever the status
    code, since x402 challenges arrive as ordinary (402) JSON responses.
    """

    def __init__(self, config: ScraperApiConfig, session: requests.Session | None = None) -> None:
        """Initialize the provider.

        Args:
            config: API base URL, timeout and user agent
            session: Optional pre-configured session (default: new session)
        """
        self.config = config
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = config.user_agent

        logger.info(f"RequestsProvider initialized for {config.base_url}")

    def build_url(self, path: str) -> str:
        """Join an endpoint path onto the API base URL."""
        return f"{self.config.base_url}/{path.lstrip('/')}"

    async def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = self.build_url(path)

        try:
            # Run requests in thread pool to avoid blocking
            loop = asyncio.get_event_loop()
            response = await loop.run_in_executor(
                None,
                lambda: self.session.request(method, url, timeout=self.config.timeout, **kwargs),
            )
        except requests.RequestException as e:
            record_request(url=url, success=False, error=str(e))
            raise

        elapsed_ms = response.elapsed.total_seconds() * 1000 if response.elapsed else None
        record_request(
            url=url,
            success=response.ok,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
            error=None if response.ok else response.reason,
        )
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def _to_api_response(self, response: requests.Response, payload: Any) -> ApiResponse:
        return ApiResponse(
            url=response.url,
            status_code=response.status_code,
            payload=payload,
            elapsed_ms=response.elapsed.total_seconds() * 1000 if response.elapsed else None,
        )

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> ApiResponse:
        """Send a GET request and decode the JSON body."""
        response = await self._send("GET", path, params=params, headers={"Accept": "*/*"})
        return self._to_api_response(response, response.json())

    async def post_json(self, path: str, body: dict[str, Any]) -> ApiResponse:
        """Send a JSON POST request and decode the JSON body."""
        response = await self._send("POST", path, json=body)
        return self._to_api_response(response, response.json())

    async def post(self, path: str, body: dict[str, Any]) -> ApiResponse:
        """Send a JSON POST request, keeping only the status."""
        response = await self._send("POST", path, json=body)
        return self._to_api_response(response, None)
