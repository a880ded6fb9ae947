"""Pydantic data models for scraping API responses.

Every response from the scraping API is classified once, right after it is
decoded, into one of these variants:
- Payment challenges (PaymentChallenge)
- Link discovery (LinkListing, LinkResult)
- Batch text extraction (ExtractionBatch, ExtractedText, ExtractionResult)

Each model keeps the raw JSON object it was built from so results can be
returned to MCP clients verbatim.
"""

from x402_scraper_mcp.models.base import ApiPayload
from x402_scraper_mcp.models.extraction import (
    ExtractedText,
    ExtractionBatch,
    ExtractionResult,
    ItemOutcome,
    parse_extraction_result,
)
from x402_scraper_mcp.models.links import LinkListing, LinkResult, parse_link_result
from x402_scraper_mcp.models.payment import PaymentChallenge, is_payment_required

__all__ = [
    "ApiPayload",
    # Payment models
    "PaymentChallenge",
    "is_payment_required",
    # Link discovery models
    "LinkListing",
    "LinkResult",
    "parse_link_result",
    # Extraction models
    "ExtractedText",
    "ExtractionBatch",
    "ExtractionResult",
    "ItemOutcome",
    "parse_extraction_result",
]
