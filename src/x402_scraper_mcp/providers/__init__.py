"""Transports for the external scraping API."""

from x402_scraper_mcp.providers.base import ApiResponse, ScraperApiProvider
from x402_scraper_mcp.providers.requests_provider import RequestsProvider

__all__ = ["ApiResponse", "ScraperApiProvider", "RequestsProvider"]
