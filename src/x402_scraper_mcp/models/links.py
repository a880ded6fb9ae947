"""Pydantic models for link discovery."""

from __future__ import annotations

from typing import Any, Union

from pydantic import Field

from x402_scraper_mcp.models.base import ApiPayload
from x402_scraper_mcp.models.payment import PaymentChallenge, is_payment_required


class LinkListing(ApiPayload):
    """Links discovered on a page."""

    links: list[Any] | None = Field(default=None, description="Discovered URLs, in page order")

    @property
    def urls(self) -> list[str]:
        """Discovered links that are strings."""
        return [link for link in self.links or [] if isinstance(link, str)]


LinkResult = Union[PaymentChallenge, LinkListing]


def parse_link_result(payload: Any) -> LinkResult:
    """Classify a decoded ``/links`` response.

    Args:
        payload: Decoded JSON body

    Returns:
        PaymentChallenge or LinkListing

    Raises:
        ValueError: If the body is not a JSON object
    """
    if is_payment_required(payload):
        return PaymentChallenge.from_payload(payload)
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected links response: expected a JSON object, got {type(payload).__name__}")
    return LinkListing.from_payload(payload)
