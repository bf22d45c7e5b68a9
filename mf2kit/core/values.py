"""
Value accessors: plaintext, HTML and date values of item properties.

Every accessor takes a caller-supplied fallback (default None) which is
returned whenever the property is absent or malformed.
"""
import warnings
from html import escape
from typing import Any, Callable, Optional

from bs4 import BeautifulSoup

from mf2kit.core.dates import is_well_formed_datetime
from mf2kit.core.shapes import ValueKind, classify_value, has_property
from mf2kit.utils.logger import ComponentLogger

DATE_KINDS = ("published", "updated")
SUMMARY_LENGTH = 19

logger = ComponentLogger("value_accessors")


def _first_value(item: Any, name: str) -> Any:
    return item["properties"][name][0]


def to_plaintext(value: Any) -> Any:
    """Return the `value` of an item or embedded value, else value itself."""
    kind = classify_value(value)
    if kind in (ValueKind.ITEM, ValueKind.EMBEDDED):
        return value.get("value")
    return value


def get_plaintext(item: Any, name: str, fallback: Any = None) -> Any:
    """Plaintext of the first value of property `name`."""
    if has_property(item, name):
        return to_plaintext(_first_value(item, name))
    return fallback


def get_plaintext_all(item: Any, name: str, fallback: Any = None) -> Any:
    """Plaintext of every value of property `name`, in source order."""
    if has_property(item, name):
        return [to_plaintext(v) for v in item["properties"][name]]
    return fallback


def to_html(value: Any) -> str:
    """
    HTML for a property value.

    Embedded values keep their markup; items and plain strings are escaped.
    """
    kind = classify_value(value)
    if kind == ValueKind.EMBEDDED:
        return value["html"]
    if kind == ValueKind.ITEM:
        return escape(str(value.get("value") or ""))
    if kind == ValueKind.TEXT:
        return escape(value)
    if value is None:
        return ""
    return escape(str(value))


def get_html(item: Any, name: str, fallback: Any = None) -> Any:
    """HTML of the first value of property `name`."""
    if has_property(item, name):
        return to_html(_first_value(item, name))
    return fallback


def get_datetime_property(
    kind: str,
    item: Any,
    ensure_valid: bool = False,
    fallback: Any = None,
    validator: Callable[[str], bool] = is_well_formed_datetime,
) -> Any:
    """
    Get `published` or `updated`, each falling back to the other.

    Args:
        kind: "published" or "updated"
        item: The item to read from
        ensure_valid: Only return values accepted by `validator`
        fallback: Returned when no (valid) value is found
        validator: Date well-formedness check

    Returns:
        The plaintext date string, or fallback
    """
    if kind not in DATE_KINDS:
        logger.log_error(
            f"Unknown date property: {kind!r}",
            error_type="invalid_argument",
            expected=list(DATE_KINDS),
        )
        raise ValueError(f"kind must be one of {DATE_KINDS}, got {kind!r}")

    complement = "updated" if kind == "published" else "published"

    if has_property(item, kind):
        candidate = get_plaintext(item, kind)
    elif has_property(item, complement):
        candidate = get_plaintext(item, complement)
    else:
        return fallback

    if not ensure_valid:
        return candidate

    if validator(candidate):
        return candidate
    return fallback


def get_published(item: Any, ensure_valid: bool = False, fallback: Any = None) -> Any:
    """Date published, falling back to date updated."""
    return get_datetime_property("published", item, ensure_valid, fallback)


def get_updated(item: Any, ensure_valid: bool = False, fallback: Any = None) -> Any:
    """Date updated, falling back to date published."""
    return get_datetime_property("updated", item, ensure_valid, fallback)


def get_prop(item: Any, name: str, fallback: Any = None) -> Any:
    """Deprecated alias of get_plaintext."""
    warnings.warn(
        "get_prop is deprecated, use get_plaintext",
        DeprecationWarning,
        stacklevel=2,
    )
    return get_plaintext(item, name, fallback)


def get_summary(item: Any) -> Optional[str]:
    """
    Deprecated: the `summary` plaintext, or a short teaser of `content`.

    The teaser is the first 19 characters of the tag-stripped content
    followed by an ellipsis.
    """
    warnings.warn(
        "get_summary is deprecated and will be removed",
        DeprecationWarning,
        stacklevel=2,
    )
    if has_property(item, "summary"):
        return get_plaintext(item, "summary")

    content = get_plaintext(item, "content")
    if not isinstance(content, str):
        return None

    text = BeautifulSoup(content, "lxml").get_text()
    return text[:SUMMARY_LENGTH] + "…"
