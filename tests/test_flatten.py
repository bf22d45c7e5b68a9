"""Tests for the tree flattener."""
from mf2kit.core.flatten import flatten_all, flatten_properties

from conftest import make_card, make_item


def ids(items):
    return [id(i) for i in items]


class TestFlattenProperties:
    def test_no_nested_items(self):
        assert flatten_properties(make_item(["h-entry"], {"name": ["x"]})) == []

    def test_non_item(self):
        assert flatten_properties({"value": "x"}) == []

    def test_preorder(self):
        deep = make_card(name="Deep")
        org = make_item(["h-card", "h-org"], {"name": ["Org"], "member": [deep]})
        author = make_item(["h-card"], {"name": ["Bob"], "org": [org]})
        location = make_item(["h-adr"], {"locality": ["Town"]})
        entry = make_item(
            ["h-entry"],
            {"author": ["plain", author], "location": [location], "content": [{"value": "c", "html": "c"}]},
        )

        assert ids(flatten_properties(entry)) == ids([author, org, deep, location])

    def test_nested_item_followed_by_its_own_flattening(self):
        inner = make_card(name="Inner")
        middle = make_item(["h-cite"], {"author": [inner]})
        outer = make_item(["h-entry"], {"in-reply-to": [middle]})

        result = flatten_properties(outer)
        position = ids(result).index(id(middle))
        expected = flatten_properties(middle)
        assert ids(result[position + 1:position + 1 + len(expected)]) == ids(expected)

    def test_repeated_reference_kept(self):
        card = make_card(name="Bob")
        entry = make_item(["h-entry"], {"author": [card], "contributor": [card]})
        assert ids(flatten_properties(entry)) == [id(card), id(card)]

    def test_cycle_does_not_recurse_forever(self):
        card = make_card(name="Bob")
        entry = make_item(["h-entry"], {"author": [card]})
        card["properties"]["wrote"] = [entry]

        assert ids(flatten_properties(entry)) == [id(card)]

    def test_depth_cutoff(self):
        leaf = make_card(name="Leaf")
        level2 = make_item(["h-card"], {"member": [leaf]})
        level1 = make_item(["h-card"], {"member": [level2]})
        root = make_item(["h-entry"], {"author": [level1]})

        assert ids(flatten_properties(root, max_depth=2)) == ids([level1, level2])
        assert ids(flatten_properties(root)) == ids([level1, level2, leaf])


class TestFlattenAll:
    def test_single_item_collection(self):
        item = make_item(["h-card"], {"name": ["Bob"]})
        assert flatten_all({"items": [item], "rels": {}}) == [item]

    def test_bare_item(self):
        item = make_item(["h-card"], {"name": ["Bob"]})
        assert flatten_all(item) == [item]

    def test_order_with_children(self):
        a0 = make_card(name="a0")
        child0_author = make_card(name="c0")
        child0 = make_item(["h-entry"], {"author": [child0_author]})
        grandchild = make_item(["h-entry"])
        child1 = make_item(["h-entry"], children=[grandchild])
        item0 = make_item(["h-feed"], {"author": [a0]}, children=[child0, child1])
        item1 = make_card(name="Second")

        result = flatten_all({"items": [item0, item1], "rels": {}})

        assert ids(result) == ids([item0, a0, child0, child0_author, child1, item1])

    def test_children_of_children_not_expanded(self, blog_page):
        reply_author = make_card(name="Replier")
        reply = make_item(["h-entry"], {"author": [reply_author]})
        feed, card = blog_page["items"]
        entries = feed["children"]
        entries[0]["children"] = [reply]

        result = flatten_all(blog_page)

        assert ids(result) == ids([feed, entries[0], entries[1], card])
        assert id(reply) not in ids(result)
        assert id(reply_author) not in ids(result)

    def test_skips_malformed(self):
        item = make_card(name="Bob")
        assert flatten_all({"items": [item, "junk", {"type": []}], "rels": {}}) == [item]

    def test_non_collection(self):
        assert flatten_all("nothing") == []
        assert flatten_all(None) == []

    def test_does_not_mutate(self, blog_page):
        before = repr(blog_page)
        flatten_all(blog_page)
        assert repr(blog_page) == before
