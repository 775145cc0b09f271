"""Registry data models — a registry location and the outcome of changing the store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

from plugreg.errors import InvalidRegistryURL

VALID_SCHEMES = {"http", "https"}


class RegistryChange(Enum):
    """Result of an add or remove against the registry store."""

    ADDED = "added"
    ALREADY_ADDED = "already_added"
    ROOT_PATH = "root_path"  # host with no organization path
    REMOVED = "removed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Registry:
    """A registry location, split into its host group and namespace path."""

    host: str  # scheme://host[:port]
    path: str = ""  # organization / namespace, no surrounding slashes

    @property
    def url(self) -> str:
        return f"{self.host}/{self.path}" if self.path else self.host

    @property
    def is_root(self) -> bool:
        return not self.path


def is_valid_registry_url(url: str) -> bool:
    """Syntactic check only: an http(s) scheme and a host."""
    if not url:
        return False
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False
    return parts.scheme.lower() in VALID_SCHEMES and bool(parts.hostname)


def parse_registry_url(url: str) -> Registry:
    """Split ``url`` into ``scheme://host`` and the path below it.

    Trailing slashes are dropped so ``https://github.com/org/`` and
    ``https://github.com/org`` name the same registry.

    Raises:
        InvalidRegistryURL: If ``url`` is not an http(s) URL with a host.
    """
    if not is_valid_registry_url(url):
        raise InvalidRegistryURL(url)
    parts = urlsplit(url.strip())
    host = normalize_host(f"{parts.scheme}://{parts.netloc}")
    return Registry(host=host, path=parts.path.strip("/"))


def normalize_host(host: str) -> str:
    """Lowercase the scheme and host of a ``scheme://host`` group key."""
    host = host.strip().rstrip("/")
    parts = urlsplit(host)
    if not parts.scheme or not parts.netloc:
        return host
    return f"{parts.scheme.lower()}://{parts.netloc.lower()}"
