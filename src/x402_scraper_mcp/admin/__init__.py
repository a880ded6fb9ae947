"""Admin API functionality for monitoring.

This module provides administrative endpoints for:
- Health checks and server status
- Request and payment statistics
- A read-only view of the startup configuration

The admin module follows a router -> service pattern:
- router.py: HTTP endpoint handlers
- service.py: Stats and config gathering
"""

from x402_scraper_mcp.admin.router import (
    api_stats,
    health_check,
    register_admin_routes,
)
from x402_scraper_mcp.admin.service import (
    get_current_config,
    get_stats,
)

__all__ = [
    # Router functions
    "api_stats",
    "health_check",
    "register_admin_routes",
    # Service functions
    "get_current_config",
    "get_stats",
]
