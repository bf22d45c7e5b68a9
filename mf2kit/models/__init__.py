"""Models package initialization."""
from mf2kit.core.shapes import ValueKind
from mf2kit.models.document import EmbeddedValue, Item, Collection

__all__ = ["ValueKind", "EmbeddedValue", "Item", "Collection"]
