"""Tests for the x402 payment executor."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
import requests

from x402_scraper_mcp.metrics import ServerMetrics
from x402_scraper_mcp.models import PaymentChallenge
from x402_scraper_mcp.payments import PAYMENT_PATH, PaymentExecutor

from conftest import api_response, make_challenge


class TestPaymentExecutor:
    """Tests for PaymentExecutor."""

    @pytest.fixture
    def executor(self, provider: Mock) -> PaymentExecutor:
        """Create a PaymentExecutor around the mock provider."""
        return PaymentExecutor(provider)

    @pytest.mark.asyncio
    async def test_pay_success(
        self, executor: PaymentExecutor, provider: Mock, challenge: dict[str, Any]
    ) -> None:
        """Test that a 2xx payment response means success."""
        provider.post.return_value = api_response(None, status_code=200)

        assert await executor.pay(PaymentChallenge.from_payload(challenge)) is True
        provider.post.assert_awaited_once_with(PAYMENT_PATH, {"url": "https://api.example.com/paid"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [302, 402, 500])
    async def test_pay_non_success_status(
        self, executor: PaymentExecutor, provider: Mock, challenge: dict[str, Any], status_code: int
    ) -> None:
        """Test that any non-2xx status means failure."""
        provider.post.return_value = api_response(None, status_code=status_code)

        assert await executor.pay(PaymentChallenge.from_payload(challenge)) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError("Connection refused"),
            requests.Timeout("Timed out"),
            RuntimeError("unexpected"),
        ],
    )
    async def test_pay_transport_error(
        self, executor: PaymentExecutor, provider: Mock, challenge: dict[str, Any], error: Exception
    ) -> None:
        """Test that transport errors are absorbed."""
        provider.post.side_effect = error

        assert await executor.pay(PaymentChallenge.from_payload(challenge)) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource", [None, ""])
    async def test_pay_without_resource(
        self, executor: PaymentExecutor, provider: Mock, resource: str | None
    ) -> None:
        """Test that challenges without a resource fail without a network call."""
        assert await executor.pay(PaymentChallenge.from_payload(make_challenge(resource))) is False
        provider.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_attempt_reports_details(
        self, executor: PaymentExecutor, provider: Mock, challenge: dict[str, Any]
    ) -> None:
        """Test that attempt keeps the failure details."""
        provider.post.return_value = api_response(None, status_code=402)

        result = await executor.attempt(PaymentChallenge.from_payload(challenge))

        assert result.success is False
        assert result.resource == "https://api.example.com/paid"
        assert result.status_code == 402
        assert "402" in result.error

    @pytest.mark.asyncio
    async def test_pay_records_metrics(
        self,
        executor: PaymentExecutor,
        provider: Mock,
        challenge: dict[str, Any],
        fresh_metrics: ServerMetrics,
    ) -> None:
        """Test that payment attempts are counted."""
        await executor.pay(PaymentChallenge.from_payload(challenge))
        provider.post.return_value = api_response(None, status_code=500)
        await executor.pay(PaymentChallenge.from_payload(challenge))

        assert fresh_metrics.total_payments == 2
        assert fresh_metrics.successful_payments == 1
        assert fresh_metrics.failed_payments == 1
