"""
Tree flattener: linearizes nested items into one ordered list.

Order is depth-first preorder, so every item is immediately followed by the
items nested in its own properties, before any of its siblings.
"""
from collections.abc import Mapping
from typing import Any, FrozenSet, List, Optional

from mf2kit.config import config
from mf2kit.core.shapes import is_collection, is_item
from mf2kit.utils.logger import ComponentLogger

logger = ComponentLogger("flattener")


def _top_level_items(mfs: Any) -> List[Any]:
    """Items to start from: a collection's items, a lone item, or a list."""
    if is_collection(mfs):
        return list(mfs["items"])
    if is_item(mfs):
        return [mfs]
    if isinstance(mfs, (list, tuple)):
        return list(mfs)
    return []


def _has_nested_items(item: Mapping) -> bool:
    return any(
        is_item(value)
        for values in item["properties"].values()
        if isinstance(values, (list, tuple))
        for value in values
    )


def _walk_properties(
    item: Mapping,
    ancestors: FrozenSet[int],
    depth: int,
    max_depth: int,
    out: List[Any],
) -> None:
    if depth >= max_depth:
        if not _has_nested_items(item):
            return
        logger.log_fallback(
            from_source="nested_properties",
            to_source="truncated",
            reason=f"Nesting deeper than {max_depth} levels",
            item_type=list(item["type"]),
        )
        return

    ancestors = ancestors | {id(item)}

    for values in item["properties"].values():
        if not isinstance(values, (list, tuple)):
            continue
        for value in values:
            if not is_item(value):
                continue
            if id(value) in ancestors:
                logger.log_fallback(
                    from_source="nested_properties",
                    to_source="skipped",
                    reason="Item nested inside itself",
                    item_type=list(value["type"]),
                )
                continue
            out.append(value)
            _walk_properties(value, ancestors, depth + 1, max_depth, out)


def flatten_properties(item: Any, max_depth: Optional[int] = None) -> List[Any]:
    """
    Every item nested in `item`'s properties, at any depth.

    Args:
        item: The item to flatten
        max_depth: Nesting cutoff, defaults to config.MAX_FLATTEN_DEPTH

    Returns:
        List of nested items (duplicates kept, `item` itself excluded)
    """
    items: List[Any] = []
    if not is_item(item):
        return items

    limit = config.MAX_FLATTEN_DEPTH if max_depth is None else max_depth
    _walk_properties(item, frozenset(), 0, limit, items)
    return items


def flatten_all(mfs: Any, max_depth: Optional[int] = None) -> List[Any]:
    """
    Flatten a collection, item or list of items.

    Each top-level item is followed by its nested property items, then by
    each of its children with their nested property items. Children of
    children are not expanded.
    """
    items: List[Any] = []

    for mf in _top_level_items(mfs):
        if not is_item(mf):
            continue

        items.append(mf)
        items.extend(flatten_properties(mf, max_depth))

        children = mf.get("children")
        if not children or not isinstance(children, (list, tuple)):
            continue

        for child in children:
            if not is_item(child):
                continue
            items.append(child)
            items.extend(flatten_properties(child, max_depth))

    logger.log_action("flatten", "completed", total_items=len(items))
    return items
