"""Exception types for the failures a command cannot recover from.

Expected outcomes (a registry that is already added, one that does not
exist, a search with no hits) are return values, not exceptions.
"""

from __future__ import annotations


class InvalidRegistryURL(ValueError):
    """The given registry is not a syntactically valid http(s) URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"{url} is not a valid URL.")


class RegistryConfigError(ValueError):
    """registries.yml exists but does not hold a host -> paths mapping."""


class RegistrySaveError(RuntimeError):
    """registries.yml could not be written."""

    def __init__(self, op: str, cause: Exception):
        self.op = op
        self.cause = cause
        super().__init__(f"Unable to {op} plugin registry.\n{cause}")


class UnsupportedHostError(LookupError):
    """No repository-listing scraper exists for a registry host."""

    def __init__(self, host: str, reason: str = "no listing support"):
        self.host = host
        super().__init__(f"{host}: {reason}")
