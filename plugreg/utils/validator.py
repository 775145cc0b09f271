"""Plugin validator — decide whether a repository page is a Terminus plugin.

A repository qualifies when the ``<title>`` of its page mentions both the
product keyword and the word "plugin".
"""

from __future__ import annotations

import html
import logging
import re
from typing import Optional
from urllib.parse import urlsplit

import httpx

from plugreg.registry.models import is_valid_registry_url
from plugreg.utils.http import fetch_page

logger = logging.getLogger(__name__)

PRODUCT_KEYWORD = "terminus"
PLUGIN_KEYWORD = "plugin"

TITLE_PATTERN = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)


def extract_title(page: str) -> str:
    """Return the text of the first ``<title>`` element, or ''."""
    match = TITLE_PATTERN.search(page or "")
    if not match:
        return ""
    return " ".join(html.unescape(match.group(1)).split())


def is_plugin_title(title: str) -> bool:
    lowered = title.lower()
    return PRODUCT_KEYWORD in lowered and PLUGIN_KEYWORD in lowered


def has_namespace(registry: str) -> bool:
    """True if ``registry`` is an absolute URL below a host root."""
    if not is_valid_registry_url(registry):
        return False
    return urlsplit(registry).path.strip("/") != ""


def validate_plugin(
    registry: str, name: str, client: Optional[httpx.Client] = None
) -> str:
    """Fetch ``registry/name`` and return its title if it is a plugin.

    Returns an empty string for anything that is not a plugin, including
    registries without an organization path and unreachable pages.
    """
    if not has_namespace(registry) or not name:
        return ""

    page = fetch_page(f"{registry.rstrip('/')}/{name}", client=client)
    if not page:
        return ""

    title = extract_title(page)
    if title and is_plugin_title(title):
        return title
    logger.debug("%s/%s is not a plugin (title: %r)", registry, name, title)
    return ""
