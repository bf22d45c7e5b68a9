"""
Author resolution for an item (typically an h-entry), using the page it
appears on as context.

See https://indieweb.org/authorship
"""
from typing import Any, List, Optional

from mf2kit.core.flatten import flatten_all
from mf2kit.core.query import get_rel_urls
from mf2kit.core.shapes import has_property, is_item
from mf2kit.core.urls import same_hostname
from mf2kit.core.values import get_plaintext, get_plaintext_all
from mf2kit.resolvers.cards import card_urls, find_cards, first_card_with_url
from mf2kit.utils.logger import ComponentLogger


class AuthorResolver:
    """
    Multi-stage author resolver.

    Without context, the item's own author (card or plaintext) is all there
    is. With context, a plaintext author is resolved against the page's
    cards by url, then by name; failing that the page's rel=author link and
    finally a card on the same host as the item are tried.

    Result is a card, an author string (the candidate without context, or
    the page rel=author link), or None.
    """

    def __init__(self, card_type: Optional[str] = None):
        self.card_type = card_type
        self.logger = ComponentLogger("author_resolver")

    def resolve(
        self,
        mf: Any,
        context: Any = None,
        url: Optional[str] = None,
        match_name: bool = True,
        match_hostname: bool = True,
    ) -> Any:
        """
        Resolve the author of `mf`.

        Args:
            mf: The item whose author is wanted
            context: Parsed collection of the page the item appears on
            url: URL of the item, defaults to its own `url` property
            match_name: Resolve a plaintext author by card name
            match_hostname: Fall back to a card on the same host as `url`

        Returns:
            A card item, an author string, or None
        """
        if url is None and has_property(mf, "url"):
            url = get_plaintext(mf, "url")

        author = self._entry_author(mf)

        if context is None:
            return author

        cards = find_cards(flatten_all(context), self.card_type, flatten=False)

        if isinstance(author, str):
            card = first_card_with_url(cards, author)
            if card is not None:
                self.logger.log_decision(
                    decision="author_card_by_url",
                    reason="Plaintext author matches a card url",
                    url=url,
                )
                author = card

        if isinstance(author, str) and match_name:
            card = self._first_card_with_name(cards, author)
            if card is not None:
                self.logger.log_decision(
                    decision="author_card_by_name",
                    reason="Plaintext author matches a card name",
                    url=url,
                )
                author = card

        if is_item(author):
            return author

        rel_author_href = None
        rel_author = get_rel_urls(context, "author")
        if rel_author:
            rel_author_href = rel_author[0]
            card = first_card_with_url(cards, rel_author_href)
            if card is not None:
                self.logger.log_decision(
                    decision="author_card_by_rel_author",
                    reason="Card url matches the page rel=author link",
                    url=url,
                    rel_author=rel_author_href,
                )
                return card

        if url is not None and match_hostname:
            for card in cards:
                if any(same_hostname(url, u) for u in card_urls(card)):
                    self.logger.log_decision(
                        decision="author_card_by_hostname",
                        reason="Card url shares the item's hostname",
                        url=url,
                    )
                    return card

        # Without fetching anything this is as far as resolution goes
        return rel_author_href

    def _entry_author(self, mf: Any) -> Any:
        """The item's own author: a nested card, a reviewer card, or plaintext."""
        if has_property(mf, "author") and is_item(mf["properties"]["author"][0]):
            return mf["properties"]["author"][0]
        if has_property(mf, "reviewer") and is_item(mf["properties"]["reviewer"][0]):
            return mf["properties"]["reviewer"][0]
        if has_property(mf, "author"):
            return get_plaintext(mf, "author")
        return None

    def _first_card_with_name(self, cards: List[Any], name: str) -> Optional[Any]:
        for card in cards:
            if name in get_plaintext_all(card, "name", []):
                return card
        return None


_resolver = AuthorResolver()


def get_author(
    mf: Any,
    context: Any = None,
    url: Optional[str] = None,
    match_name: bool = True,
    match_hostname: bool = True,
) -> Any:
    """Resolve the author of an item; see AuthorResolver.resolve."""
    return _resolver.resolve(mf, context, url, match_name, match_hostname)
