"""HTTP helpers — status checks and page fetches against registry hosts.

Network failures never escape this module: a status check that cannot complete is
an invalid URL and a fetch that cannot complete is an empty page.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import httpx

from plugreg import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"plugreg/{__version__}"

# httpx errors that mean "could not get an answer" rather than a bug.
NETWORK_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError)


def new_client(timeout: Optional[float] = None) -> httpx.Client:
    """Build a blocking client. ``timeout=None`` waits indefinitely."""
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )


@contextmanager
def client_scope(
    client: Optional[httpx.Client] = None, timeout: Optional[float] = None
) -> Iterator[httpx.Client]:
    """Yield ``client`` as-is, or a throwaway client closed on exit."""
    if client is not None:
        yield client
        return
    with new_client(timeout) as owned:
        yield owned


def is_absolute_url(url: str) -> bool:
    """True for a URL httpx can request without a base URL."""
    if not url:
        return False
    try:
        return httpx.URL(url).is_absolute_url
    except httpx.InvalidURL:
        return False


def is_valid_url(url: str, client: Optional[httpx.Client] = None) -> bool:
    """Return True if ``url`` answers with HTTP 200.

    Only the first response counts; redirects are not followed.
    """
    if not is_absolute_url(url):
        return False
    try:
        with client_scope(client) as c:
            with c.stream("GET", url, follow_redirects=False) as response:
                status = response.status_code
    except NETWORK_ERRORS as e:
        logger.debug("Status check failed for %s: %s", url, e)
        return False
    logger.debug("Status %s -> %d", url, status)
    return status == 200


def fetch_page(url: str, client: Optional[httpx.Client] = None) -> str:
    """Return the body of ``url``, or an empty string on any failure."""
    if not is_absolute_url(url):
        return ""
    try:
        with client_scope(client) as c:
            response = c.get(url, follow_redirects=True)
    except NETWORK_ERRORS as e:
        logger.debug("Fetch failed for %s: %s", url, e)
        return ""
    if not response.is_success:
        logger.debug("Fetch %s -> %d", url, response.status_code)
        return ""
    return response.text
