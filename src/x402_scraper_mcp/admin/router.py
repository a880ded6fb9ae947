"""Admin API routes for health, stats and configuration."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from x402_scraper_mcp.admin.service import get_current_config, get_stats
from x402_scraper_mcp.config import ScraperApiConfig


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint for container orchestration.

    Returns:
        JSONResponse with status: healthy
    """
    return JSONResponse({"status": "healthy"})


async def api_stats(request: Request) -> JSONResponse:
    """Get server statistics and metrics as JSON."""
    return JSONResponse(get_stats())


def register_admin_routes(mcp: FastMCP, config: ScraperApiConfig) -> None:
    """Register the admin HTTP routes on the MCP server.

    Only served by the HTTP transports (streamable-http, sse).

    Args:
        mcp: FastMCP server instance to register routes on
        config: Configuration shown by /api/config
    """

    async def api_config_get(request: Request) -> JSONResponse:
        """Get the server configuration."""
        return JSONResponse(get_current_config(config))

    mcp.custom_route("/healthz", methods=["GET"])(health_check)
    mcp.custom_route("/api/stats", methods=["GET"])(api_stats)
    mcp.custom_route("/api/config", methods=["GET"])(api_config_get)
