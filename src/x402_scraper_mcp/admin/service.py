"""Admin service layer for stats and configuration views."""

from __future__ import annotations

from typing import Any

from x402_scraper_mcp.config import ScraperApiConfig
from x402_scraper_mcp.metrics import get_metrics


def get_stats() -> dict[str, Any]:
    """Get server statistics and metrics.

    Returns:
        Dictionary with request and payment metrics
    """
    return get_metrics().to_dict()


def get_current_config(config: ScraperApiConfig) -> dict[str, Any]:
    """Describe the configuration the server was started with.

    Args:
        config: The configuration injected at startup

    Returns:
        Dictionary with current config and note
    """
    return {
        "config": config.to_dict(),
        "note": "Configuration is read from the environment at startup and cannot be changed at runtime",
    }
