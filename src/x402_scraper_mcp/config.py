"""Configuration for the x402 scraper MCP server."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_USER_AGENT = "MCP-Scraper/1.0"


@dataclass(frozen=True)
class ScraperApiConfig:
    """Connection settings for the external scraping API.

    Built once at process start and handed to every component that talks
    to the API.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        # Endpoint paths are joined as f"{base_url}/links"
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScraperApiConfig:
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            ScraperApiConfig with values from SCRAPER_API_URL,
            SCRAPER_API_TIMEOUT and SCRAPER_USER_AGENT

        Raises:
            ValueError: If SCRAPER_API_TIMEOUT is not a positive number
        """
        env = os.environ if environ is None else environ

        timeout: float | None = None
        raw_timeout = env.get("SCRAPER_API_TIMEOUT", "").strip()
        if raw_timeout:
            timeout = float(raw_timeout)
            if timeout <= 0:
                raise ValueError(f"SCRAPER_API_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(
            base_url=env.get("SCRAPER_API_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            user_agent=env.get("SCRAPER_USER_AGENT") or DEFAULT_USER_AGENT,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
        }
