"""MCP tool definitions for paid web scraping."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from x402_scraper_mcp.tools.service import ScrapeService

NO_MATCH_MESSAGE = "No URLs matched domain filter"


def to_json(payload: Any) -> str:
    """Serialize a tool result as indented JSON text."""
    return json.dumps(payload, indent=2)


def build_scraping_tools(service: ScrapeService) -> list[Callable[..., Awaitable[str]]]:
    """Create the MCP tool functions bound to a scrape service.

    Args:
        service: Service the tools delegate to

    Returns:
        Tool functions, in registration order
    """

    async def get_links(url: str) -> str:
        """Get all links from a URL. Auto-pays x402 if required.

        Args:
            url: The page to discover links on (must be http:// or https://)

        Returns:
            JSON with the discovered links, or the unpaid x402 challenge
        """
        result = await service.get_links(url)
        return to_json(result.raw)

    async def extract_text(urls: list[str], domain: str) -> str:
        """Extract text from URLs. Filters to domain, excludes socials. Auto-pays x402.

        Args:
            urls: Pages to extract text from
            domain: Only URLs on this domain (or its subdomains) are extracted

        Returns:
            JSON with one result per extracted URL, or a message if no URL matched
        """
        result = await service.extract_text(urls, domain)
        if result is None:
            return NO_MATCH_MESSAGE
        return to_json(result.raw)

    async def scrape_website(url: str) -> str:
        """Full scrape: get links, filter to domain, extract text. Auto-pays x402.

        Args:
            url: The site's entry page

        Returns:
            JSON with links, filtered URLs and extracted text
        """
        result = await service.scrape_website(url)
        return to_json(result)

    return [get_links, extract_text, scrape_website]


def register_scraping_tools(mcp: FastMCP, service: ScrapeService) -> None:
    """Register the scraping tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
        service: Service the tools delegate to
    """
    for tool in build_scraping_tools(service):
        mcp.tool()(tool)
