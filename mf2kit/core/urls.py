"""
Component-wise URL comparison.
"""
from typing import Any, Dict
from urllib.parse import urlsplit

URL_COMPONENTS = ("scheme", "host", "port", "user", "pass", "path", "query", "fragment")


def parse_url_components(url: Any) -> Dict[str, Any]:
    """
    Split a URL into the components it actually has.

    Keys are only present for components found in the URL. `pathname` is
    always added: the path, or "/" when the URL has none.
    Non-string input yields an empty dict.
    """
    if not isinstance(url, str):
        return {}

    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return {}

    try:
        port = parts.port
    except ValueError:
        # Keep unparseable ports so they still take part in comparisons
        port = parts.netloc.rpartition(":")[2]

    components = {
        "scheme": parts.scheme or None,
        "host": parts.hostname or None,
        "port": port,
        "user": parts.username,
        "pass": parts.password,
        "path": parts.path or None,
        "query": parts.query or None,
        "fragment": parts.fragment or None,
    }
    result = {k: v for k, v in components.items() if v is not None}
    result["pathname"] = result.get("path") or "/"
    return result


def urls_match(url1: Any, url2: Any) -> bool:
    """
    True if both URLs have the same set of components with equal values.

    A component present on only one side makes the URLs differ, whichever
    side it is on.
    """
    if not isinstance(url1, str) or not isinstance(url2, str):
        return False

    u1 = parse_url_components(url1)
    u2 = parse_url_components(url2)

    for component in set(u1) | set(u2):
        if component not in u1 or component not in u2:
            return False
        if u1[component] != u2[component]:
            return False

    return True


def same_hostname(url1: Any, url2: Any) -> bool:
    """True if both URLs have a host and it is the same."""
    host1 = parse_url_components(url1).get("host")
    host2 = parse_url_components(url2).get("host")
    return host1 is not None and host1 == host2
