"""Search — live lookup of plugins across the configured registries."""

from plugreg.search.engine import PluginSearch, search
from plugreg.search.models import PluginCandidate, SearchResult

__all__ = ["PluginCandidate", "PluginSearch", "SearchResult", "search"]
