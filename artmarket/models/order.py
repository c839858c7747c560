"""
Order, payment and delivery records.

Order status transitions are enforced by the server. The client renders
whatever status string comes back, so ``Order.status`` is a plain string
that compares equal to the matching OrderStatus member.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from artmarket.models.artwork import Artwork


class OrderStatus(str, Enum):
    """Known order statuses."""

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderItem(BaseModel):
    """One artwork line inside an order."""

    model_config = ConfigDict(extra="ignore")

    artwork_id: int
    quantity: int = 1
    price: float = 0.0


class ShippingDetails(BaseModel):
    """Shipping address collected at checkout. Serialized in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""


class Order(BaseModel):
    """An order as returned by the orders endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int
    status: str = OrderStatus.PENDING.value
    items: list[OrderItem] = Field(default_factory=list)
    total_amount: float | None = Field(
        default=None,
        validation_alias=AliasChoices("total_amount", "total"),
    )
    shipping_details: dict[str, Any] | None = None
    artwork: Artwork | None = None
    created_at: datetime | None = None

    @property
    def amount(self) -> float:
        """Displayed order amount: artwork price, else order total, else 0."""
        if self.artwork is not None and self.artwork.price:
            return self.artwork.price
        return self.total_amount or 0.0


class Payment(BaseModel):
    """Payment record attached to an order."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    status: str
    amount: float | None = None


class Delivery(BaseModel):
    """Delivery record attached to an order."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    status: str
    carrier: str | None = None
    tracking_number: str | None = None


class PaymentIntent(BaseModel):
    """Server-created payment intent handed to the card widget."""

    model_config = ConfigDict(extra="ignore")

    client_secret: str


@dataclass
class OrderDetails:
    """Payment and delivery state shown in an order's detail view."""

    payment_status: str
    delivery: Delivery | None = None
