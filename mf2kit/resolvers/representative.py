"""
Representative card resolution.

Given the parsed microformats of a page and the URL it was fetched from,
find the single card that represents the page (its author or owner).

See http://microformats.org/wiki/representative-h-card-parsing
"""
from typing import Any, Optional

from mf2kit.core.query import find_by_predicate, get_rel_urls
from mf2kit.core.shapes import has_property
from mf2kit.core.urls import urls_match
from mf2kit.core.values import get_plaintext
from mf2kit.resolvers.cards import card_has_url, is_card
from mf2kit.utils.logger import ComponentLogger


class RepresentativeCardResolver:
    """
    Three-tier representative card resolver.

    Tiers, first match wins:
    1. uid and url both match the page URL
    2. url matches one of the page's rel=me links
    3. url matches the page URL, and exactly one card does

    Ambiguity is never guessed: no tier matching means no card.
    """

    def __init__(self, card_type: Optional[str] = None):
        self.card_type = card_type
        self.logger = ComponentLogger("representative_card")

    def resolve(self, mfs: Any, url: str) -> Optional[Any]:
        """
        Find the representative card of a page.

        Args:
            mfs: Parsed collection (or item) of the page
            url: The URL the page was fetched from

        Returns:
            The representative card, or None if none was found
        """
        card = self._match_uid_and_url(mfs, url)
        if card is not None:
            self.logger.log_decision(
                decision="uid_url_match",
                reason="Card uid and url match the page URL",
                url=url,
            )
            return card

        card = self._match_rel_me(mfs)
        if card is not None:
            self.logger.log_decision(
                decision="rel_me_match",
                reason="Card url matches a rel=me link",
                url=url,
            )
            return card

        return self._match_sole_url(mfs, url)

    def _match_uid_and_url(self, mfs: Any, url: str) -> Optional[Any]:
        def predicate(mf: Any) -> bool:
            return (
                is_card(mf, self.card_type)
                and has_property(mf, "uid")
                and has_property(mf, "url")
                and urls_match(get_plaintext(mf, "uid"), url)
                and card_has_url(mf, [url])
            )

        cards = find_by_predicate(mfs, predicate)
        return cards[0] if cards else None

    def _match_rel_me(self, mfs: Any) -> Optional[Any]:
        rel_me = get_rel_urls(mfs, "me")
        if not rel_me:
            return None

        cards = find_by_predicate(
            mfs,
            lambda mf: is_card(mf, self.card_type) and card_has_url(mf, rel_me),
        )
        return cards[0] if cards else None

    def _match_sole_url(self, mfs: Any, url: str) -> Optional[Any]:
        cards = find_by_predicate(
            mfs,
            lambda mf: is_card(mf, self.card_type) and card_has_url(mf, [url]),
        )
        # The same card object reached twice is still one card
        cards = list({id(card): card for card in cards}.values())

        if len(cards) == 1:
            self.logger.log_decision(
                decision="sole_url_match",
                reason="Exactly one card url matches the page URL",
                url=url,
            )
            return cards[0]

        self.logger.log_decision(
            decision="no_representative_card",
            reason="ambiguous url match" if cards else "no card matched",
            url=url,
            candidates=len(cards),
        )
        return None


_resolver = RepresentativeCardResolver()


def get_representative_card(mfs: Any, url: str) -> Optional[Any]:
    """Find the representative card of a page, or None."""
    return _resolver.resolve(mfs, url)
