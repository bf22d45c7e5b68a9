"""
Shape predicates for parsed microformats2 trees.

Nodes are plain mappings/lists as emitted by an mf2 parser. Anything that
does not have the expected shape is simply "not that kind of node".
"""
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

_NUMERIC_KEY = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class ValueKind(str, Enum):
    """Kind of a single property value."""
    ITEM = "item"
    EMBEDDED = "embedded"
    TEXT = "text"
    OTHER = "other"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def has_numeric_keys(node: Mapping) -> bool:
    """True if any key of the mapping is a number or a numeric string."""
    for key in node:
        if isinstance(key, bool):
            continue
        if isinstance(key, (int, float)):
            return True
        if isinstance(key, str) and _NUMERIC_KEY.match(key):
            return True
    return False


def is_item(node: Any) -> bool:
    """
    True if node is a microformat item.

    Requires a mapping without numeric keys, a non-empty `type` (a list,
    tuple or set of tags, never a bare string) and a `properties` mapping.
    """
    if not isinstance(node, Mapping) or has_numeric_keys(node):
        return False
    types = node.get("type")
    if not types or isinstance(types, str) or not isinstance(types, (list, tuple, set, frozenset)):
        return False
    return isinstance(node.get("properties"), Mapping)


def is_collection(node: Any) -> bool:
    """True if node has an `items` field which is a list."""
    return isinstance(node, Mapping) and _is_sequence(node.get("items"))


def is_embedded_value(node: Any) -> bool:
    """True if node is a {value, html} pair."""
    return (
        isinstance(node, Mapping)
        and not has_numeric_keys(node)
        and node.get("value") is not None
        and node.get("html") is not None
    )


def classify_value(value: Any) -> ValueKind:
    """Classify a property value. Items win over embedded values."""
    if is_item(value):
        return ValueKind.ITEM
    if is_embedded_value(value):
        return ValueKind.EMBEDDED
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER


def has_property(item: Any, name: str) -> bool:
    """True if item has a non-empty list of values for property `name`."""
    if not isinstance(item, Mapping):
        return False
    properties = item.get("properties")
    if not isinstance(properties, Mapping):
        return False
    values = properties.get(name)
    return _is_sequence(values) and len(values) > 0
