"""
ArtMarket services.

Checkout flow built on top of the cart and orders synchronizers.
"""

from artmarket.services.checkout import ORDER_PLACED_MESSAGE, CheckoutService, EmptyCartError

__all__ = [
    "ORDER_PLACED_MESSAGE",
    "CheckoutService",
    "EmptyCartError",
]
