"""Tests for URL component parsing and comparison."""
import pytest

from mf2kit.core.urls import parse_url_components, same_hostname, urls_match


class TestParseUrl:
    def test_full_url(self):
        parts = parse_url_components("https://user:pw@Example.com:8080/a/b?x=1#top")
        assert parts == {
            "scheme": "https",
            "host": "example.com",
            "port": 8080,
            "user": "user",
            "pass": "pw",
            "path": "/a/b",
            "query": "x=1",
            "fragment": "top",
            "pathname": "/a/b",
        }

    def test_pathname_defaults_to_slash(self):
        parts = parse_url_components("https://example.com")
        assert "path" not in parts
        assert parts["pathname"] == "/"

    def test_non_string(self):
        assert parse_url_components(None) == {}
        assert parse_url_components({"value": "https://example.com/"}) == {}


@pytest.mark.parametrize("url", [
    "https://example.com/",
    "https://example.com",
    "http://example.com:8080/path?q=1#frag",
    "/relative/path",
])
def test_reflexive(url):
    assert urls_match(url, url)


@pytest.mark.parametrize("a, b", [
    ("https://example.com/", "https://example.com/?q=1"),
    ("https://example.com/", "https://example.com/#me"),
    ("https://example.com/", "https://example.com:443/"),
    ("https://example.com", "https://example.com/"),
    ("https://user@example.com/", "https://example.com/"),
])
def test_one_sided_component_is_symmetric(a, b):
    assert not urls_match(a, b)
    assert not urls_match(b, a)


def test_differs_by_value():
    assert not urls_match("https://example.com/a", "https://example.com/b")
    assert not urls_match("http://example.com/", "https://example.com/")


def test_host_case_insensitive():
    assert urls_match("https://EXAMPLE.com/", "https://example.com/")


def test_non_strings_never_match():
    assert not urls_match(None, None)
    assert not urls_match("https://example.com/", None)


class TestSameHostname:
    def test_same(self):
        assert same_hostname("https://example.com/a", "http://example.com/b?x")

    def test_different(self):
        assert not same_hostname("https://example.com/", "https://example.org/")

    def test_relative_urls_have_no_host(self):
        assert not same_hostname("/a", "/b")
