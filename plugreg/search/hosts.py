"""Repository listing scrapers, keyed by registry host.

When a requested name is not a direct hit, the search falls back to the
registry's repository listing page. Each supported Git host provides a
``RepositoryListing`` that knows how to pull repository names out of it.
"""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urlsplit

import httpx

from plugreg.errors import UnsupportedHostError
from plugreg.utils.http import fetch_page

logger = logging.getLogger(__name__)


class RepositoryListing:
    """Strategy for listing the repositories under a registry."""

    host: str = ""

    def listing_url(self, registry: str) -> str:
        raise NotImplementedError

    def repository_names(
        self, registry: str, client: Optional[httpx.Client] = None
    ) -> Optional[list[str]]:
        """Repository names in the listing, or None if it could not be fetched."""
        raise NotImplementedError


class GitHubListing(RepositoryListing):
    """Scrapes ``https://github.com/<org>?tab=repositories``.

    Repository links on that page carry an ``itemprop="... codeRepository"``
    marker; the name is taken from the ``/<org>/<name>"`` href before it.
    """

    host = "github.com"
    LISTING_QUERY = "?tab=repositories"
    MARKER = "codeRepository"

    def listing_url(self, registry: str) -> str:
        return registry.rstrip("/") + self.LISTING_QUERY

    def repository_names(
        self, registry: str, client: Optional[httpx.Client] = None
    ) -> Optional[list[str]]:
        page = fetch_page(self.listing_url(registry), client=client)
        if not page:
            return None
        return self.parse_names(registry, page)

    def parse_names(self, registry: str, page: str) -> list[str]:
        path = urlsplit(registry).path.rstrip("/")
        pattern = re.compile(re.escape(path) + r'/(.*?)".*?' + re.escape(self.MARKER))
        names: list[str] = []
        for name in pattern.findall(page):
            if name and name not in names:
                names.append(name)
        logger.debug("Found %d repositories under %s", len(names), registry)
        return names


class BitbucketListing(RepositoryListing):
    """Placeholder for Bitbucket; listing is not implemented."""

    host = "bitbucket.com"

    def listing_url(self, registry: str) -> str:
        raise UnsupportedHostError(self.host, "repository listing is not implemented")

    def repository_names(
        self, registry: str, client: Optional[httpx.Client] = None
    ) -> Optional[list[str]]:
        raise UnsupportedHostError(self.host, "repository listing is not implemented")


LISTINGS: dict[str, RepositoryListing] = {
    listing.host: listing for listing in (GitHubListing(), BitbucketListing())
}


def listing_for(registry: str) -> RepositoryListing:
    """Return the listing strategy for the host of ``registry``.

    Raises:
        UnsupportedHostError: If the host has no listing strategy.
    """
    host = (urlsplit(registry).hostname or "").lower()
    try:
        return LISTINGS[host]
    except KeyError:
        raise UnsupportedHostError(host or registry) from None
