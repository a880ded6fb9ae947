"""x402 payment side-channel."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from x402_scraper_mcp.metrics import record_payment
from x402_scraper_mcp.models import PaymentChallenge
from x402_scraper_mcp.providers import ScraperApiProvider

logger = logging.getLogger(__name__)

PAYMENT_PATH = "/do-payment"


@dataclass
class PaymentResult:
    """Outcome of a single payment attempt."""

    success: bool
    resource: str | None = None
    status_code: int | None = None
    error: str | None = None


class PaymentExecutor:
    """Pays for resources named in x402 challenges."""

    def __init__(self, provider: ScraperApiProvider) -> None:
        self.provider = provider

    async def attempt(self, challenge: PaymentChallenge) -> PaymentResult:
        """Try to pay for the first resource offered by a challenge.

        Args:
            challenge: The payment challenge returned by the API

        Returns:
            PaymentResult describing what happened; never raises
        """
        resource = challenge.resource
        if not resource:
            logger.warning("Payment challenge has no resource to pay for")
            return PaymentResult(success=False, error="No resource in payment challenge")

        logger.info(f"Paying for: {resource}")
        try:
            response = await self.provider.post(PAYMENT_PATH, {"url": resource})
        except Exception as e:
            logger.error(f"Payment error for {resource}: {e}")
            return PaymentResult(success=False, resource=resource, error=str(e))

        if response.ok:
            logger.info(f"Payment SUCCESS for {resource}")
            return PaymentResult(success=True, resource=resource, status_code=response.status_code)

        logger.warning(f"Payment FAILED for {resource} (status {response.status_code})")
        return PaymentResult(
            success=False,
            resource=resource,
            status_code=response.status_code,
            error=f"Payment service returned HTTP {response.status_code}",
        )

    async def pay(self, challenge: PaymentChallenge) -> bool:
        """Pay for a challenge's resource.

        Returns:
            True if the payment service confirmed the payment
        """
        result = await self.attempt(challenge)
        record_payment(
            resource=result.resource,
            success=result.success,
            status_code=result.status_code,
            error=result.error,
        )
        return result.success
