"""Core package initialization."""
from mf2kit.core.shapes import (
    ValueKind,
    has_numeric_keys,
    is_item,
    is_collection,
    is_embedded_value,
    classify_value,
    has_property,
)
from mf2kit.core.values import (
    to_plaintext,
    get_plaintext,
    get_plaintext_all,
    to_html,
    get_html,
    get_datetime_property,
    get_published,
    get_updated,
    get_prop,
    get_summary,
)
from mf2kit.core.dates import is_well_formed_datetime
from mf2kit.core.urls import parse_url_components, urls_match, same_hostname
from mf2kit.core.flatten import flatten_properties, flatten_all
from mf2kit.core.query import find_by_predicate, find_by_type, find_by_property, get_rel_urls

__all__ = [
    "ValueKind",
    "has_numeric_keys",
    "is_item",
    "is_collection",
    "is_embedded_value",
    "classify_value",
    "has_property",
    "to_plaintext",
    "get_plaintext",
    "get_plaintext_all",
    "to_html",
    "get_html",
    "get_datetime_property",
    "get_published",
    "get_updated",
    "get_prop",
    "get_summary",
    "is_well_formed_datetime",
    "parse_url_components",
    "urls_match",
    "same_hostname",
    "flatten_properties",
    "flatten_all",
    "find_by_predicate",
    "find_by_type",
    "find_by_property",
    "get_rel_urls",
]
