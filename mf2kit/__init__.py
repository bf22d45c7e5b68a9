"""
mf2kit - query and resolve parsed microformats2 documents.

Works on the plain mapping trees produced by an mf2 parser: shape checks,
property accessors, flattening, searching, representative card and author
resolution.
"""
from mf2kit.core import (
    is_item,
    is_collection,
    is_embedded_value,
    has_property,
    to_plaintext,
    get_plaintext,
    get_plaintext_all,
    to_html,
    get_html,
    get_datetime_property,
    get_published,
    get_updated,
    parse_url_components,
    urls_match,
    same_hostname,
    flatten_properties,
    flatten_all,
    find_by_predicate,
    find_by_type,
    find_by_property,
)
from mf2kit.core.shapes import ValueKind
from mf2kit.models import EmbeddedValue, Item, Collection
from mf2kit.resolvers import (
    RepresentativeCardResolver,
    get_representative_card,
    AuthorResolver,
    get_author,
)

__version__ = "1.0.0"

__all__ = [
    "is_item",
    "is_collection",
    "is_embedded_value",
    "has_property",
    "to_plaintext",
    "get_plaintext",
    "get_plaintext_all",
    "to_html",
    "get_html",
    "get_datetime_property",
    "get_published",
    "get_updated",
    "parse_url_components",
    "urls_match",
    "same_hostname",
    "flatten_properties",
    "flatten_all",
    "find_by_predicate",
    "find_by_type",
    "find_by_property",
    "ValueKind",
    "EmbeddedValue",
    "Item",
    "Collection",
    "RepresentativeCardResolver",
    "get_representative_card",
    "AuthorResolver",
    "get_author",
]
