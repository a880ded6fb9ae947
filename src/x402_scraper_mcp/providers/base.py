"""Base provider interface for the scraping API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ApiResponse:
    """Response from a scraping API call."""

    url: str
    status_code: int
    payload: Any
    elapsed_ms: float | None = None

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300


class ScraperApiProvider(ABC):
    """Abstract base class for scraping API transports."""

    @abstractmethod
    async def get_json(self, path: str, params: dict[str, str] | None = None) -> ApiResponse:
        """Send a GET request and decode the JSON body.

        Args:
            path: Endpoint path relative to the API base URL (e.g. "/links")
            params: Query string parameters

        Returns:
            ApiResponse with the decoded body as payload, whatever the status code

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the body is not valid JSON
        """
        pass

    @abstractmethod
    async def post_json(self, path: str, body: dict[str, Any]) -> ApiResponse:
        """Send a JSON POST request and decode the JSON body.

        Args:
            path: Endpoint path relative to the API base URL
            body: JSON-serializable request body

        Returns:
            ApiResponse with the decoded body as payload, whatever the status code

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the body is not valid JSON
        """
        pass

    @abstractmethod
    async def post(self, path: str, body: dict[str, Any]) -> ApiResponse:
        """Send a JSON POST request without decoding the response body.

        Args:
            path: Endpoint path relative to the API base URL
            body: JSON-serializable request body

        Returns:
            ApiResponse with payload set to None

        Raises:
            requests.RequestException: If the request fails
        """
        pass
