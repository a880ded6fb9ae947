"""MCP server exposing a paid scraping API with automatic x402 payments."""

__version__ = "1.0.0"
