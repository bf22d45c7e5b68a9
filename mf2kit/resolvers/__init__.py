"""Resolvers package initialization."""
from mf2kit.resolvers.representative import RepresentativeCardResolver, get_representative_card
from mf2kit.resolvers.author import AuthorResolver, get_author

__all__ = [
    "RepresentativeCardResolver",
    "get_representative_card",
    "AuthorResolver",
    "get_author",
]
