"""Search engine — find plugins by partial or complete name.

For every configured registry and every requested name the engine first
tries a direct hit (``<registry>/<name>`` resolves and is a plugin). When
the candidate does not resolve it scrapes the registry's repository listing
and keeps the plugins whose location or title contains the name.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

import httpx

from plugreg.errors import UnsupportedHostError
from plugreg.registry.store import RegistryStore
from plugreg.search.hosts import listing_for
from plugreg.search.models import SearchResult
from plugreg.utils.http import client_scope, is_valid_url
from plugreg.utils.validator import validate_plugin

logger = logging.getLogger(__name__)


def describe(title: str) -> str:
    """Keep the text between the first and second colon of a page title.

    GitHub titles look like ``"org/repo: Terminus Foo Plugin"``.
    """
    parts = title.split(":")
    return parts[1].strip() if len(parts) > 1 else title


class PluginSearch:
    """Searches the registries of a ``RegistryStore``.

    A search holds no state between invocations; every call queries the
    registry hosts again.
    """

    def __init__(
        self,
        store: Optional[RegistryStore] = None,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.store = store or RegistryStore()
        self.client = client
        self.timeout = timeout

    def search(self, names: Sequence[str]) -> SearchResult:
        result = SearchResult()
        registries = self.store.list_registries()
        result.registries_searched = len(registries)
        start = time.monotonic()

        with client_scope(self.client, self.timeout) as client:
            # Valid plugin titles seen so far in this search, by location.
            titles: dict[str, str] = {}
            # Whether each scraped registry produced a listing page.
            listed: dict[str, bool] = {}

            for registry in registries:
                for name in names:
                    candidate = f"{registry}/{name}"
                    if is_valid_url(candidate, client):
                        if validate_plugin(registry, name, client):
                            # Exact hits are keyed by the bare name, fuzzy
                            # hits by full location.
                            result.plugins[name] = registry
                        continue

                    if registry not in listed:
                        try:
                            found = self._scrape(registry, client)
                        except UnsupportedHostError as e:
                            logger.info("Skipping %s: %s", registry, e)
                            result.skipped.append(registry)
                            found = None
                        listed[registry] = found is not None
                        if found:
                            titles.update(found)
                    if not listed[registry]:
                        continue

                    needle = name.lower()
                    for location, title in titles.items():
                        if needle in location.lower() or needle in title.lower():
                            result.plugins[location] = describe(title)

        result.elapsed = time.monotonic() - start
        logger.debug(
            "Searched %d registries for %s: %d found",
            result.registries_searched, list(names), result.count,
        )
        return result

    def _scrape(self, registry: str, client: httpx.Client) -> Optional[dict[str, str]]:
        """Return ``{registry/name: title}`` for every plugin in the listing.

        None means the listing page could not be fetched.
        """
        listing = listing_for(registry)
        repos = listing.repository_names(registry, client)
        if repos is None:
            return None
        found: dict[str, str] = {}
        for repo in repos:
            title = validate_plugin(registry, repo, client)
            if title:
                found[f"{registry}/{repo}"] = title
        return found


def search(
    names: Sequence[str],
    store: Optional[RegistryStore] = None,
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
) -> SearchResult:
    """Search every configured registry for each of ``names``."""
    return PluginSearch(store=store, client=client, timeout=timeout).search(names)
