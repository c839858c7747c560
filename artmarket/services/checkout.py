"""
Checkout flow.

Creates the payment intent for the card widget and places the order from the
current cart. Card confirmation itself happens in the payment widget and is
not handled here.
"""

import logging

from artmarket.client import MarketplaceClient
from artmarket.config import settings
from artmarket.models.failure import ApiError
from artmarket.models.order import Order, OrderItem, PaymentIntent, ShippingDetails
from artmarket.notifications import Notifier
from artmarket.sync.cart import CartSynchronizer
from artmarket.sync.orders import OrdersSynchronizer

logger = logging.getLogger(__name__)

ORDER_PLACED_MESSAGE = (
    "Order placed successfully! You will receive a confirmation email shortly."
)


class EmptyCartError(ValueError):
    """Raised when placing an order with nothing in the cart."""


class CheckoutService:
    def __init__(
        self,
        client: MarketplaceClient,
        cart: CartSynchronizer,
        orders: OrdersSynchronizer,
        notifier: Notifier,
        currency: str | None = None,
    ) -> None:
        self._client = client
        self._cart = cart
        self._orders = orders
        self._notifier = notifier
        self.currency = currency or settings.currency

    async def create_payment_intent(
        self,
        amount: float | None = None,
        description: str = "Artwork purchase",
    ) -> PaymentIntent:
        """
        Create a payment intent on the server.

        Args:
            amount: Amount to charge. Defaults to the cart total including
                shipping and tax.
            description: Description shown on the payment

        Returns:
            PaymentIntent carrying the client secret for the card widget

        Raises:
            ApiError: If the intent could not be created
        """
        if amount is None:
            amount = self._cart.summary.total

        try:
            return await self._client.create_payment_intent(amount, self.currency, description)
        except ApiError as e:
            logger.error("Error creating payment intent: %s", e.message)
            self._notifier.error("Failed to initialize payment")
            raise

    async def place_order(self, shipping: ShippingDetails) -> Order:
        """
        Place an order for everything in the cart.

        On success the cart and order list are re-fetched, since the server
        owns both after an order is created.

        Raises:
            EmptyCartError: If the cart has no entries
            ApiError: If the server rejects the order
        """
        entries = self._cart.entries
        if not entries:
            raise EmptyCartError("Cannot place an order for an empty cart")

        items = [
            OrderItem(artwork_id=entry.artwork_id, quantity=entry.quantity, price=entry.unit_price)
            for entry in entries
        ]
        total_amount = self._cart.summary.total

        try:
            order = await self._client.create_order(items, shipping, total_amount)
        except ApiError as e:
            logger.error("Error placing order: %s", e.message)
            self._notifier.error("Failed to place order")
            raise

        logger.info("Placed order %s for %.2f", order.id, total_amount)
        self._notifier.success(ORDER_PLACED_MESSAGE)

        await self._cart.fetch()
        await self._orders.fetch()
        return order
