"""Tests for URL status checks and page fetches."""

import httpx

from plugreg.utils.http import fetch_page, is_absolute_url, is_valid_url


def test_valid_url_on_200(web):
    web.pages["https://example.com/ok"] = "fine"
    assert is_valid_url("https://example.com/ok", web.client())


def test_invalid_url_on_error_status(web):
    web.status["https://example.com/gone"] = 404
    web.status["https://example.com/boom"] = 500
    assert not is_valid_url("https://example.com/gone", web.client())
    assert not is_valid_url("https://example.com/boom", web.client())


def test_redirect_is_not_followed():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, text="new")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    assert not is_valid_url("https://example.com/old", client)
    assert fetch_page("https://example.com/old", client) == "new"


def test_empty_and_relative_urls_make_no_request(web):
    assert not is_valid_url("", web.client())
    assert not is_valid_url("not a url", web.client())
    assert not is_valid_url("/pantheon-systems/foo", web.client())
    assert fetch_page("", web.client()) == ""
    assert fetch_page("not a url", web.client()) == ""
    assert web.requests == []


def test_is_absolute_url():
    assert is_absolute_url("https://github.com/org")
    assert not is_absolute_url("github.com/org")
    assert not is_absolute_url("")


def test_unreachable_host(web):
    web.unreachable.add("https://down.example.com/")
    assert not is_valid_url("https://down.example.com/", web.client())
    assert fetch_page("https://down.example.com/", web.client()) == ""


def test_timeout_is_absorbed():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    assert not is_valid_url("https://slow.example.com/", client)
    assert fetch_page("https://slow.example.com/", client) == ""


def test_fetch_page_body(web):
    web.pages["https://example.com/page"] = "<title>x</title>"
    assert fetch_page("https://example.com/page", web.client()) == "<title>x</title>"


def test_fetch_page_error_status_is_empty(web):
    web.pages["https://example.com/err"] = "error page"
    web.status["https://example.com/err"] = 503
    assert fetch_page("https://example.com/err", web.client()) == ""
