"""
Cart line entries.

The cart endpoints return entries in two shapes: with a nested ``artwork``
object, or with flat artwork fields (``price``, ``title``, ...) next to
``artwork_id``. Both are mapped into one CartEntry at validation time so
nothing downstream needs to branch on the shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from artmarket.models.artwork import Artwork

# Flat fields that may stand in for a missing nested artwork object
_FLAT_ARTWORK_FIELDS = ("title", "price", "category", "image", "artist")


class CartEntry(BaseModel):
    """One artwork in the cart with its quantity."""

    model_config = ConfigDict(extra="ignore")

    artwork_id: int
    quantity: int = Field(default=1, ge=1)
    artwork: Artwork

    @model_validator(mode="before")
    @classmethod
    def _normalize_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        artwork = data.get("artwork")
        flat = {key: data[key] for key in _FLAT_ARTWORK_FIELDS if data.get(key) is not None}

        if artwork is None:
            artwork_id = data.get("artwork_id", data.get("id"))
            data["artwork"] = {"id": artwork_id, **flat}
        elif isinstance(artwork, dict):
            # Nested object wins, flat fields and artwork_id only fill gaps
            nested = {k: v for k, v in artwork.items() if v is not None}
            data["artwork"] = {"id": data.get("artwork_id"), **flat, **nested}

        if data.get("artwork_id") is None:
            nested = data["artwork"]
            data["artwork_id"] = nested.id if isinstance(nested, Artwork) else nested.get("id")

        return data

    @property
    def unit_price(self) -> float:
        return self.artwork.price

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity
