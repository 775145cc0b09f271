"""Tests for the plugin validator."""

from plugreg.utils.validator import extract_title, has_namespace, is_plugin_title, validate_plugin

from conftest import page

REGISTRY = "https://github.com/some-org"


def test_plugin_title_returned(web):
    web.pages[f"{REGISTRY}/foo"] = page("Foo: Terminus Bar Plugin")
    title = validate_plugin(REGISTRY, "foo", web.client())
    assert title == "Foo: Terminus Bar Plugin"
    assert "terminus" in title.lower()
    assert "plugin" in title.lower()


def test_title_missing_product_keyword(web):
    web.pages[f"{REGISTRY}/foo"] = page("Foo: Drush Bar Plugin")
    assert validate_plugin(REGISTRY, "foo", web.client()) == ""


def test_title_missing_plugin_keyword(web):
    web.pages[f"{REGISTRY}/foo"] = page("Foo: Terminus Bar Tool")
    assert validate_plugin(REGISTRY, "foo", web.client()) == ""


def test_keyword_at_start_of_title(web):
    web.pages[f"{REGISTRY}/foo"] = page("Terminus Build Tools Plugin")
    assert validate_plugin(REGISTRY, "foo", web.client()) == "Terminus Build Tools Plugin"


def test_page_without_title(web):
    web.pages[f"{REGISTRY}/foo"] = "<html><body>Terminus Plugin</body></html>"
    assert validate_plugin(REGISTRY, "foo", web.client()) == ""


def test_missing_page(web):
    assert validate_plugin(REGISTRY, "nothing-here", web.client()) == ""


def test_unreachable_page(web):
    web.unreachable.add(f"{REGISTRY}/foo")
    assert validate_plugin(REGISTRY, "foo", web.client()) == ""


def test_registry_without_namespace_skips_network(web):
    assert validate_plugin("https://github.com", "foo", web.client()) == ""
    assert validate_plugin("https://github.com/", "foo", web.client()) == ""
    assert validate_plugin("not-a-url", "foo", web.client()) == ""
    assert web.requests == []


def test_extract_title():
    assert extract_title(page("  Spaced \n Title ")) == "Spaced Title"
    assert extract_title('<TITLE lang="en">Upper</TITLE>') == "Upper"
    assert extract_title("<title>Tom &amp; Jerry&#39;s</title>") == "Tom & Jerry's"
    assert extract_title("<title>first</title><title>second</title>") == "first"
    assert extract_title("") == ""


def test_is_plugin_title_case_insensitive():
    assert is_plugin_title("TERMINUS plugin")
    assert not is_plugin_title("terminus")
    assert not is_plugin_title("")


def test_has_namespace():
    assert has_namespace("https://github.com/org")
    assert not has_namespace("https://github.com")
    assert not has_namespace("https://github.com/")
    assert not has_namespace("")
