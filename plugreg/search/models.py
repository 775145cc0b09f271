"""Search data models — what a search hands to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PluginCandidate:
    """A single row of search output."""

    location: str
    description: str


@dataclass
class SearchResult:
    """Result of searching every registry for every requested name."""

    plugins: dict[str, str] = field(default_factory=dict)  # identifier -> description
    registries_searched: int = 0
    skipped: list[str] = field(default_factory=list)  # registries on unsupported hosts
    elapsed: float = 0.0  # seconds

    @property
    def count(self) -> int:
        return len(self.plugins)

    def candidates(self) -> list[PluginCandidate]:
        return [
            PluginCandidate(location=location, description=description)
            for location, description in self.plugins.items()
        ]

    def summary(self) -> str:
        plural = "s" if self.count != 1 else ""
        return f"Found {self.count} plugin{plural} in {self.elapsed:.0f} sec."
