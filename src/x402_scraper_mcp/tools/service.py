"""Business logic for the paid scraping tools.

Each fetcher owns its own payment loop: a request answered with an x402
challenge is paid for and replayed at most once.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from x402_scraper_mcp.metrics import record_replay
from x402_scraper_mcp.models import (
    ExtractionResult,
    LinkResult,
    PaymentChallenge,
    parse_extraction_result,
    parse_link_result,
)
from x402_scraper_mcp.payments import PaymentExecutor
from x402_scraper_mcp.providers import ScraperApiProvider
from x402_scraper_mcp.utils import domain_of, filter_urls

logger = logging.getLogger(__name__)

LINKS_PATH = "/links"
EXTRACT_TEXT_PATH = "/extract-text"


class LinkFetcher:
    """Discovers the links on a page through the scraping API."""

    def __init__(self, provider: ScraperApiProvider, payments: PaymentExecutor) -> None:
        self.provider = provider
        self.payments = payments

    async def fetch(self, url: str, retry_allowed: bool = True) -> LinkResult:
        """Get the links on a page, paying for access if asked to.

        Args:
            url: The page to discover links on
            retry_allowed: Whether a payment challenge may be paid and replayed

        Returns:
            LinkListing, or the PaymentChallenge if payment was not possible
        """
        while True:
            logger.info(f"Fetching links: {url}")
            response = await self.provider.get_json(LINKS_PATH, params={"url": url})
            result = parse_link_result(response.payload)

            if not isinstance(result, PaymentChallenge):
                return result

            logger.info(f"x402 challenge for links of {url}")
            if not retry_allowed or not await self.payments.pay(result):
                return result

            retry_allowed = False
            record_replay()


class TextExtractor:
    """Extracts text from a batch of pages through the scraping API."""

    def __init__(self, provider: ScraperApiProvider, payments: PaymentExecutor) -> None:
        self.provider = provider
        self.payments = payments

    async def extract(self, urls: list[str], domain: str, retry_allowed: bool = True) -> ExtractionResult:
        """Extract text from pages, paying for access if asked to.

        A challenge for the whole batch is paid and replayed only if the
        payment succeeds. Challenges for individual pages are all paid for,
        then the batch is replayed once whatever the payment outcomes, so
        pages that could not be paid for stay in the results as challenges.

        Args:
            urls: Pages to extract text from
            domain: Domain the pages belong to
            retry_allowed: Whether payment challenges may be paid and replayed

        Returns:
            ExtractionBatch with one outcome per URL, or the top-level
            PaymentChallenge if it could not be paid
        """
        while True:
            logger.info(f"Extracting {len(urls)} URLs for domain: {domain}")
            response = await self.provider.post_json(EXTRACT_TEXT_PATH, {"urls": urls, "domain": domain})
            result = parse_extraction_result(response.payload)

            if isinstance(result, PaymentChallenge):
                logger.info("x402 challenge for extraction batch")
                if not retry_allowed or not await self.payments.pay(result):
                    return result
            else:
                if not retry_allowed:
                    return result

                challenges = result.challenges()
                if not challenges:
                    return result

                logger.info(f"Found {len(challenges)} x402 results in batch, paying...")
                paid = await asyncio.gather(*(self.payments.pay(challenge) for challenge in challenges))
                logger.info(f"Paid for {sum(paid)}/{len(challenges)} resources")

            retry_allowed = False
            record_replay()


class ScrapeService:
    """The operations exposed as MCP tools."""

    def __init__(self, fetcher: LinkFetcher, extractor: TextExtractor) -> None:
        self.fetcher = fetcher
        self.extractor = extractor

    @classmethod
    def from_provider(cls, provider: ScraperApiProvider) -> ScrapeService:
        """Build the service and its collaborators around one provider."""
        payments = PaymentExecutor(provider)
        return cls(
            fetcher=LinkFetcher(provider, payments),
            extractor=TextExtractor(provider, payments),
        )

    async def get_links(self, url: str) -> LinkResult:
        """Get all links on a page."""
        return await self.fetcher.fetch(url)

    async def extract_text(self, urls: list[str], domain: str) -> ExtractionResult | None:
        """Extract text from the URLs that belong to a domain.

        Returns:
            The extraction result, or None if no URL matched the domain
        """
        filtered = filter_urls(urls, domain)
        if not filtered:
            logger.info(f"No URLs matched domain filter for {domain}")
            return None
        return await self.extractor.extract(filtered, domain)

    async def scrape_website(self, url: str) -> dict[str, Any]:
        """Scrape a site: discover links, keep internal ones, extract their text.

        Args:
            url: The site's entry page

        Returns:
            Dictionary with the discovered links, the filtered URLs and the
            extraction result, or an error/message when the scrape stops early

        Raises:
            ValueError: If the URL cannot be parsed
        """
        domain = domain_of(url)

        links = await self.fetcher.fetch(url)
        if isinstance(links, PaymentChallenge):
            return {"error": "Payment failed for links", "x402": links.raw}

        filtered = filter_urls(links.urls, domain)
        if not filtered:
            result: dict[str, Any] = {"filtered": [], "message": "No internal links found"}
            # A response without a links field yields no links key
            if "links" in links.raw:
                result = {"links": links.raw["links"], **result}
            return result

        extracted = await self.extractor.extract(filtered, domain)

        return {"links": links.raw, "filtered": filtered, "extracted": extracted.raw}
