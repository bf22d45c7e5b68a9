"""Tests for the query layer."""
import pytest

from mf2kit.core.query import find_by_predicate, find_by_property, find_by_type, get_rel_urls

from conftest import make_card, make_item


@pytest.fixture
def cards():
    return [
        make_card(name="Alice", url="https://alice.example/"),
        make_card(name="Bob", url=["https://bob.example/", "https://twitter.com/bob"]),
        make_card(name="Carol"),
        make_card(name="Alice again", url="https://alice.example/"),
    ]


class TestFindByPredicate:
    def test_non_callable_raises(self):
        with pytest.raises(TypeError):
            find_by_predicate({"items": [], "rels": {}}, "h-card")

    def test_flattens_collection(self, blog_page):
        names = [mf["properties"]["name"][0] for mf in find_by_predicate(blog_page, lambda mf: True)]
        assert names == ["Bob's blog", "First post", "Second post", "Bob"]

    def test_without_flatten(self, blog_page):
        result = find_by_predicate(blog_page, lambda mf: True, flatten=False)
        assert result == blog_page["items"]

    def test_plain_list_is_not_flattened(self):
        nested = make_card(name="Nested")
        entry = make_item(["h-entry"], {"author": [nested]})
        assert find_by_predicate([entry], lambda mf: True) == [entry]

    def test_predicate_errors_propagate(self, blog_page):
        def boom(mf):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            find_by_predicate(blog_page, boom)


class TestFindByType:
    def test_finds_nested(self):
        nested = make_card(name="Nested")
        entry = make_item(["h-entry"], {"author": [nested]})
        assert find_by_type({"items": [entry], "rels": {}}, "h-card") == [nested]

    def test_multiple_types(self):
        org = make_item(["h-card", "h-org"], {"name": ["Org"]})
        assert find_by_type(org, "h-org") == [org]

    def test_ignores_non_items(self):
        assert find_by_type(["junk", None], "h-card") == []


class TestFindByProperty:
    def test_exact_subset_in_order(self, cards):
        result = find_by_property(cards, "url", "https://alice.example/")
        assert result == [cards[0], cards[3]]

    def test_any_value_of_the_sequence(self, cards):
        assert find_by_property(cards, "url", "https://twitter.com/bob") == [cards[1]]

    def test_no_match_is_empty(self, cards):
        assert find_by_property(cards, "url", "https://nobody.example/") == []

    def test_no_plaintext_coercion(self):
        card = make_card(name=None, url=[{"value": "https://x.example/", "html": "x"}])
        assert find_by_property([card], "url", "https://x.example/") == []


class TestRelUrls:
    def test_present(self, blog_page):
        assert get_rel_urls(blog_page, "author") == ["https://example.com/bob"]

    def test_missing_or_malformed(self):
        assert get_rel_urls({"items": []}, "me") == []
        assert get_rel_urls({"items": [], "rels": {"me": "https://x/"}}, "me") == []
        assert get_rel_urls(None, "me") == []
