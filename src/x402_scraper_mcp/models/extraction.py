"""Pydantic models for batch text extraction."""

from __future__ import annotations

from typing import Any, Union

from pydantic import Field

from x402_scraper_mcp.models.base import ApiPayload
from x402_scraper_mcp.models.payment import PaymentChallenge, is_payment_required


class ExtractedText(ApiPayload):
    """Text extracted from a single URL."""

    url: Any = Field(default=None, description="The URL the text came from")
    text: Any = Field(default=None, description="The extracted text")


ItemOutcome = Union[PaymentChallenge, ExtractedText]


class ExtractionBatch(ApiPayload):
    """Per-URL outcomes of a batch extraction, in request order."""

    results: list[Any] | None = Field(default=None, description="One outcome per requested URL")

    @property
    def outcomes(self) -> list[ItemOutcome | Any]:
        """Results classified as challenges or extracted text.

        Items that are not JSON objects are returned as-is.
        """
        outcomes: list[ItemOutcome | Any] = []
        for item in self.results or []:
            if is_payment_required(item):
                outcomes.append(PaymentChallenge.from_payload(item))
            elif isinstance(item, dict):
                outcomes.append(ExtractedText.from_payload(item))
            else:
                outcomes.append(item)
        return outcomes

    def challenges(self) -> list[PaymentChallenge]:
        """Results that still require payment."""
        return [outcome for outcome in self.outcomes if isinstance(outcome, PaymentChallenge)]


ExtractionResult = Union[PaymentChallenge, ExtractionBatch]


def parse_extraction_result(payload: Any) -> ExtractionResult:
    """Classify a decoded ``/extract-text`` response.

    Args:
        payload: Decoded JSON body

    Returns:
        PaymentChallenge or ExtractionBatch

    Raises:
        ValueError: If the body is not a JSON object
    """
    if is_payment_required(payload):
        return PaymentChallenge.from_payload(payload)
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected extraction response: expected a JSON object, got {type(payload).__name__}")
    return ExtractionBatch.from_payload(payload)
