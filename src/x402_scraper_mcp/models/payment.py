"""Pydantic models for x402 payment challenges."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from x402_scraper_mcp.models.base import ApiPayload


def is_payment_required(value: Any) -> bool:
    """Check whether a decoded JSON value is an x402 payment challenge.

    Args:
        value: Any decoded JSON value

    Returns:
        True if value is an object with a truthy ``x402Version`` and a
        truthy ``accepts`` field
    """
    if not isinstance(value, Mapping):
        return False
    return bool(value.get("x402Version")) and bool(value.get("accepts"))


class PaymentChallenge(ApiPayload):
    """An x402 "payment required" response."""

    x402_version: Any = Field(alias="x402Version", description="x402 protocol version")
    accepts: Any = Field(description="Acceptable payment options, in order of preference")

    @property
    def resource(self) -> str | None:
        """The chargeable resource URL of the first payment option, if any."""
        if not isinstance(self.accepts, list) or not self.accepts:
            return None
        option = self.accepts[0]
        if not isinstance(option, Mapping):
            return None
        resource = option.get("resource")
        if isinstance(resource, str) and resource:
            return resource
        return None
