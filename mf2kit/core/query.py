"""
Query layer: search flattened items by predicate, type or property value.
"""
from collections.abc import Mapping
from typing import Any, Callable, List

from mf2kit.core.flatten import flatten_all
from mf2kit.core.shapes import has_property, is_collection, is_item
from mf2kit.utils.logger import ComponentLogger

logger = ComponentLogger("query")


def find_by_predicate(mfs: Any, predicate: Callable[[Any], bool], flatten: bool = True) -> List[Any]:
    """
    Every item for which `predicate` holds, in order.

    Args:
        mfs: A collection, an item, or a list of items
        predicate: Unary function returning a truthy value for matches
        flatten: Search nested items and children too

    Raises:
        TypeError: If predicate is not callable
    """
    if not callable(predicate):
        logger.log_error(
            "predicate must be callable",
            error_type="invalid_argument",
            predicate_type=type(predicate).__name__,
        )
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")

    if flatten and (is_item(mfs) or is_collection(mfs)):
        candidates = flatten_all(mfs)
    elif is_collection(mfs):
        candidates = list(mfs["items"])
    elif is_item(mfs):
        candidates = [mfs]
    elif isinstance(mfs, (list, tuple)):
        candidates = list(mfs)
    else:
        candidates = []

    return [mf for mf in candidates if predicate(mf)]


def find_by_type(mfs: Any, type_name: str, flatten: bool = True) -> List[Any]:
    """Items whose type list contains `type_name`."""
    return find_by_predicate(
        mfs,
        lambda mf: is_item(mf) and type_name in mf["type"],
        flatten,
    )


def find_by_property(mfs: Any, prop_name: str, prop_value: Any, flatten: bool = True) -> List[Any]:
    """Items with `prop_value` among the raw values of property `prop_name`."""
    return find_by_predicate(
        mfs,
        lambda mf: has_property(mf, prop_name) and prop_value in mf["properties"][prop_name],
        flatten,
    )


def get_rel_urls(mfs: Any, rel: str) -> List[str]:
    """URLs a collection lists under `rels[rel]`; empty when absent."""
    if not isinstance(mfs, Mapping):
        return []
    rels = mfs.get("rels")
    if not isinstance(rels, Mapping):
        return []
    urls = rels.get(rel)
    if not isinstance(urls, (list, tuple)):
        return []
    return [u for u in urls if isinstance(u, str)]
