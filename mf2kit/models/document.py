"""
Typed models for parsed microformats2 documents.

The query and resolver functions work directly on the plain mappings an mf2
parser emits. These models are an opt-in typed layer over the same shapes:
build or validate a tree here, then hand `to_mf2()` to the core.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class EmbeddedValue(BaseModel):
    """Plaintext/markup pair, e.g. an e-content property."""
    value: str
    html: str

    def to_mf2(self) -> Dict[str, Any]:
        return {"value": self.value, "html": self.html}


class Item(BaseModel):
    """
    A microformat item.

    `value` (and `html` for e-* properties) is only set on items nested
    under a property, where the parser records the text the item was
    found in.
    """
    type: List[str] = Field(min_length=1)
    # Item first: a nested e-* item also carries value/html
    properties: Dict[str, List[Union["Item", EmbeddedValue, str]]] = Field(default_factory=dict)
    children: List["Item"] = Field(default_factory=list)
    value: Optional[str] = None
    html: Optional[str] = None

    @classmethod
    def from_mf2(cls, data: Dict[str, Any]) -> "Item":
        """Validate a raw item mapping."""
        return cls.model_validate(data)

    def to_mf2(self) -> Dict[str, Any]:
        """Convert to the plain mapping form, dropping unset optional fields."""
        data: Dict[str, Any] = {
            "type": list(self.type),
            "properties": {
                name: [_value_to_mf2(v) for v in values]
                for name, values in self.properties.items()
            },
        }
        if self.children:
            data["children"] = [child.to_mf2() for child in self.children]
        if self.value is not None:
            data["value"] = self.value
        if self.html is not None:
            data["html"] = self.html
        return data


class Collection(BaseModel):
    """Top-level parse result: items plus page-wide rel links."""
    items: List[Item] = Field(default_factory=list)
    rels: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_mf2(cls, data: Dict[str, Any]) -> "Collection":
        """
        Validate a raw collection mapping.

        A bare item is accepted and wrapped as a one-item collection.
        """
        if isinstance(data, dict) and "items" not in data and "type" in data:
            return cls(items=[Item.from_mf2(data)])
        return cls.model_validate(data)

    def to_mf2(self) -> Dict[str, Any]:
        return {
            "items": [item.to_mf2() for item in self.items],
            "rels": {rel: list(urls) for rel, urls in self.rels.items()},
        }


def _value_to_mf2(value: Union[str, EmbeddedValue, Item]) -> Any:
    if isinstance(value, (Item, EmbeddedValue)):
        return value.to_mf2()
    return value


Item.model_rebuild()
