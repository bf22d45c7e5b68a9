"""Shared fixtures: small parsed-microformats documents."""
import pytest


def make_item(types, properties=None, children=None, **extra):
    item = {"type": list(types), "properties": properties or {}}
    if children is not None:
        item["children"] = children
    item.update(extra)
    return item


def make_card(name=None, url=None, uid=None, **props):
    properties = {}
    if name is not None:
        properties["name"] = [name]
    if url is not None:
        properties["url"] = url if isinstance(url, list) else [url]
    if uid is not None:
        properties["uid"] = [uid]
    properties.update(props)
    return make_item(["h-card"], properties)


@pytest.fixture
def bob_card():
    return make_card(name="Bob", url="https://example.com/bob")


@pytest.fixture
def blog_page(bob_card):
    """An h-feed page with two entries, a sidebar card and rel links."""
    first_entry = make_item(
        ["h-entry"],
        {
            "name": ["First post"],
            "url": ["https://example.com/posts/1"],
            "author": ["Bob"],
            "published": ["2024-03-01T10:00:00Z"],
        },
    )
    second_entry = make_item(
        ["h-entry"],
        {
            "name": ["Second post"],
            "url": ["https://example.com/posts/2"],
        },
    )
    feed = make_item(["h-feed"], {"name": ["Bob's blog"]}, children=[first_entry, second_entry])
    return {
        "items": [feed, bob_card],
        "rels": {"author": ["https://example.com/bob"], "me": ["https://twitter.com/bob"]},
    }
