"""Utility functions for URL and domain handling."""

from __future__ import annotations

from urllib.parse import urlparse

# Hosts never treated as part of a scraped site
SOCIAL_HOSTS = (
    "github.com",
    "linkedin.com",
    "instagram.com",
    "twitter.com",
    "facebook.com",
    "youtube.com",
    "x.com",
)


def strip_www(host: str) -> str:
    """Remove a leading ``www.`` from a host name."""
    return host.removeprefix("www.")


def get_host(url: str) -> str:
    """Get the host name of an absolute URL.

    Args:
        url: The URL to parse

    Returns:
        Lower-cased host name

    Raises:
        ValueError: If the URL has no scheme or host
    """
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
        raise ValueError(f"Invalid URL: {url!r}")
    return parsed.hostname


def domain_of(url: str) -> str:
    """Get the domain of a URL, without a leading ``www.``.

    Raises:
        ValueError: If the URL cannot be parsed
    """
    return strip_www(get_host(url))


def is_internal_link(link: str, domain: str) -> bool:
    """Check whether a link belongs to a domain and is not a social profile.

    Unparseable links never match.
    """
    try:
        host = domain_of(link)
    except ValueError:
        return False

    if any(social in host for social in SOCIAL_HOSTS):
        return False
    return strip_www(domain) in host


def filter_urls(links: list[str], domain: str) -> list[str]:
    """Keep only same-domain, non-social links.

    Args:
        links: Candidate links, in page order
        domain: Target domain (a leading ``www.`` is ignored)

    Returns:
        Matching links in their original order, duplicates kept
    """
    return [link for link in links if is_internal_link(link, domain)]
