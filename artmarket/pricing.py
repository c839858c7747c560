"""
Checkout pricing.

Subtotal, shipping, tax and total for a set of cart entries. Shipping is
free for an empty cart and for subtotals above the free-shipping threshold,
otherwise a flat fee. Tax applies to the subtotal only.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from artmarket.config import FLAT_SHIPPING_FEE, FREE_SHIPPING_THRESHOLD, TAX_RATE
from artmarket.models.cart import CartEntry


@dataclass(frozen=True)
class OrderSummary:
    """Price breakdown shown before placing an order. Values are rounded to cents."""

    subtotal: float
    shipping: float
    tax: float
    total: float

    @property
    def free_shipping_remaining(self) -> float:
        """Amount to add before the free-shipping message goes away, 0 for an empty cart."""
        if self.subtotal <= 0 or self.subtotal >= FREE_SHIPPING_THRESHOLD:
            return 0.0
        return round(FREE_SHIPPING_THRESHOLD - self.subtotal, 2)


def calculate_shipping(subtotal: float) -> float:
    if subtotal <= 0:
        return 0.0
    if subtotal > FREE_SHIPPING_THRESHOLD:
        return 0.0
    return FLAT_SHIPPING_FEE


def calculate_summary(entries: Iterable[CartEntry]) -> OrderSummary:
    """
    Price a set of cart entries.

    Args:
        entries: Cart entries to price

    Returns:
        OrderSummary with every component rounded to cents
    """
    subtotal = round(sum(entry.line_total for entry in entries), 2)
    shipping = calculate_shipping(subtotal)
    tax = round(subtotal * TAX_RATE, 2)
    total = round(subtotal + shipping + tax, 2)
    return OrderSummary(subtotal=subtotal, shipping=shipping, tax=tax, total=total)
