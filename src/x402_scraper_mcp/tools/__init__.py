"""MCP scraping tools and business logic.

This module provides the paid scraping functionality exposed as MCP tools:
- get_links: Link discovery for a page
- extract_text: Batch text extraction for same-domain pages
- scrape_website: Links, domain filter and extraction in one call

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions and registration
- service.py: Link fetching, text extraction and the x402 payment loop
"""

from x402_scraper_mcp.tools.router import (
    build_scraping_tools,
    register_scraping_tools,
    to_json,
)
from x402_scraper_mcp.tools.service import (
    LinkFetcher,
    ScrapeService,
    TextExtractor,
)

__all__ = [
    # Registration functions
    "build_scraping_tools",
    "register_scraping_tools",
    "to_json",
    # Service classes
    "LinkFetcher",
    "TextExtractor",
    "ScrapeService",
]
