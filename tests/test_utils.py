"""Tests for URL utility functions."""

from __future__ import annotations

import pytest

from x402_scraper_mcp.utils import domain_of, filter_urls, is_internal_link, strip_www


class TestDomainOf:
    """Tests for domain_of."""

    def test_strips_leading_www(self) -> None:
        """Test that a leading www. is removed."""
        assert domain_of("https://www.example.com/path") == "example.com"

    def test_keeps_subdomains(self) -> None:
        """Test that other subdomains are kept."""
        assert domain_of("https://blog.example.com") == "blog.example.com"

    def test_only_leading_www(self) -> None:
        """Test that www. elsewhere in the host is kept."""
        assert domain_of("https://shop.www.example.com") == "shop.www.example.com"
        assert strip_www("wwwexample.com") == "wwwexample.com"

    def test_lowercases_host(self) -> None:
        """Test that hosts are compared lower-cased."""
        assert domain_of("https://WWW.Example.COM") == "example.com"

    @pytest.mark.parametrize("url", ["not a url", "", "example.com/page", "https://"])
    def test_invalid_urls(self, url: str) -> None:
        """Test that unparseable URLs raise ValueError."""
        with pytest.raises(ValueError):
            domain_of(url)


class TestFilterUrls:
    """Tests for filter_urls."""

    def test_mixed_links(self) -> None:
        """Test socials, subdomains, www and invalid links together."""
        links = [
            "https://github.com/x",
            "https://sub.example.com/a",
            "https://www.example.com/b",
            "not a url",
        ]
        assert filter_urls(links, "example.com") == [
            "https://sub.example.com/a",
            "https://www.example.com/b",
        ]

    def test_excludes_every_social_host(self) -> None:
        """Test that all denylisted hosts are excluded."""
        links = [
            "https://github.com/example.com",
            "https://www.linkedin.com/company/example.com",
            "https://instagram.com/example.com",
            "https://twitter.com/example.com",
            "https://facebook.com/example.com",
            "https://youtube.com/example.com",
            "https://x.com/example.com",
        ]
        # Domain matches the social hosts too, so only the denylist excludes them
        assert filter_urls(links, "com") == []

    def test_social_substring_match(self) -> None:
        """Test that social hosts match by containment."""
        assert filter_urls(["https://docs.github.com.example.com/a"], "example.com") == []

    def test_www_domain_argument(self) -> None:
        """Test that a www. domain argument is normalized."""
        assert filter_urls(["https://example.com/a"], "www.example.com") == ["https://example.com/a"]

    def test_other_domains_excluded(self) -> None:
        """Test that unrelated hosts are excluded."""
        assert filter_urls(["https://other.org/a", "https://example.com/b"], "example.com") == [
            "https://example.com/b"
        ]

    def test_preserves_order_and_duplicates(self) -> None:
        """Test that the filter is stable and keeps duplicates."""
        links = ["https://example.com/b", "https://example.com/a", "https://example.com/b"]
        assert filter_urls(links, "example.com") == links

    def test_idempotent(self) -> None:
        """Test that repeated calls give identical results."""
        links = ["https://example.com/a", "https://github.com/x", "mailto:me@example.com"]
        assert filter_urls(links, "example.com") == filter_urls(links, "example.com")

    def test_empty(self) -> None:
        """Test an empty input."""
        assert filter_urls([], "example.com") == []


class TestIsInternalLink:
    """Tests for is_internal_link."""

    def test_malformed_ipv6_is_not_internal(self) -> None:
        """Test that links urlparse rejects never match."""
        assert is_internal_link("http://[example.com/a", "example.com") is False
