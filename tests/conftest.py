"""Shared pytest fixtures: an isolated plugins directory and a fake web."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest


@pytest.fixture(autouse=True)
def plugins_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "plugins"
    monkeypatch.setenv("TERMINUS_PLUGINS_DIR", str(path))
    return path


class FakeWeb:
    """Serves canned pages by exact URL; everything else is a 404."""

    def __init__(self, pages: dict[str, str] | None = None):
        self.pages: dict[str, str] = dict(pages or {})
        self.status: dict[str, int] = {}
        self.unreachable: set[str] = set()
        self.requests: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if url in self.status:
            return httpx.Response(self.status[url], text=self.pages.get(url, ""))
        if url in self.pages:
            return httpx.Response(200, text=self.pages[url])
        return httpx.Response(404, text="Not Found")

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


def page(title: str, body: str = "") -> str:
    return f"<html><head><title>{title}</title></head><body>{body}</body></html>"


@pytest.fixture()
def web() -> FakeWeb:
    return FakeWeb()
