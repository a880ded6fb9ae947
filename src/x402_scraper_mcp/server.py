"""MCP server for x402-aware web scraping."""

from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp import types
from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData

from x402_scraper_mcp.admin import register_admin_routes
from x402_scraper_mcp.config import ScraperApiConfig
from x402_scraper_mcp.providers import RequestsProvider, ScraperApiProvider
from x402_scraper_mcp.tools import ScrapeService, register_scraping_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "scraper-mcp"


class ScraperMCP(FastMCP):
    """FastMCP server that reports unknown tools as METHOD_NOT_FOUND.

    The low-level tools/call handler turns every exception into an error
    result, so unknown names are rejected before it runs. A raised McpError
    reaches the client as a JSON-RPC error response.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)

        handlers = self._mcp_server.request_handlers
        call_tool_handler = handlers[types.CallToolRequest]

        async def call_known_tool(request: types.CallToolRequest) -> types.ServerResult:
            name = request.params.name
            tools = await self.list_tools()
            if name not in {tool.name for tool in tools}:
                raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))
            return await call_tool_handler(request)

        handlers[types.CallToolRequest] = call_known_tool


def create_server(
    config: ScraperApiConfig | None = None,
    provider: ScraperApiProvider | None = None,
) -> ScraperMCP:
    """Create the MCP server with its tools and admin routes.

    Args:
        config: API configuration (default: read from the environment)
        provider: API transport (default: RequestsProvider for config)

    Returns:
        Configured ScraperMCP instance
    """
    config = config or ScraperApiConfig.from_env()
    provider = provider or RequestsProvider(config)

    mcp = ScraperMCP(
        SERVER_NAME,
        instructions=(
            "A web scraping MCP server backed by a paid scraping API. "
            "Discovers links, extracts page text and scrapes whole sites, "
            "paying x402 challenges automatically."
        ),
        stateless_http=True,  # Accept requests without requiring initialize handshake
    )

    register_scraping_tools(mcp, ScrapeService.from_provider(provider))
    register_admin_routes(mcp, config)

    logger.info(f"Scraper MCP server created for API at {config.base_url}")
    return mcp


def run_server(transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('stdio', 'streamable-http' or 'sse')
        host: Host to bind to for HTTP transports (default: 0.0.0.0)
        port: Port to bind to for HTTP transports (default: 8000)
    """
    mcp = create_server()

    # Configure host and port via settings
    mcp.settings.host = host
    mcp.settings.port = port

    mcp.run(transport=transport)
