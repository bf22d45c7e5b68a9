"""
Helpers shared by the resolvers for working with cards (h-card items).
"""
from typing import Any, Iterable, List, Optional

from mf2kit.config import config
from mf2kit.core.query import find_by_type
from mf2kit.core.shapes import is_item
from mf2kit.core.urls import urls_match
from mf2kit.core.values import get_plaintext_all


def is_card(mf: Any, card_type: Optional[str] = None) -> bool:
    return is_item(mf) and (card_type or config.CARD_TYPE) in mf["type"]


def find_cards(mfs: Any, card_type: Optional[str] = None, flatten: bool = True) -> List[Any]:
    """All cards in `mfs`, in flattened order."""
    return find_by_type(mfs, card_type or config.CARD_TYPE, flatten)


def card_urls(card: Any) -> List[str]:
    """Plaintext `url` values of a card; non-string values are dropped."""
    return [u for u in get_plaintext_all(card, "url", []) if isinstance(u, str)]


def card_has_url(card: Any, urls: Iterable[str]) -> bool:
    """True if any of the card's urls matches any of `urls`."""
    wanted = list(urls)
    return any(urls_match(u, w) for u in card_urls(card) for w in wanted)


def first_card_with_url(cards: Iterable[Any], url: str) -> Optional[Any]:
    for card in cards:
        if card_has_url(card, [url]):
            return card
    return None
