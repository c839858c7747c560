"""
Cart synchronizer.

Mirrors the server cart. Every successful mutation response replaces the
local entries wholesale; a failed mutation leaves them untouched. Loading
fails open: if the cart cannot be fetched the user sees an empty cart
rather than an error.
"""

import logging

from artmarket.client import MarketplaceClient
from artmarket.models.cart import CartEntry
from artmarket.models.failure import ApiError, MutationResult
from artmarket.notifications import Notifier
from artmarket.pricing import OrderSummary, calculate_summary
from artmarket.session import Session
from artmarket.sync.base import CollectionState, Synchronizer

logger = logging.getLogger(__name__)


class CartSynchronizer(Synchronizer):
    name = "cart"

    def __init__(self, client: MarketplaceClient, session: Session, notifier: Notifier) -> None:
        super().__init__(client, session)
        self._notifier = notifier
        self._entries: list[CartEntry] = []

    @property
    def entries(self) -> list[CartEntry]:
        return list(self._entries)

    @property
    def count(self) -> int:
        """Total number of artworks, summing quantities."""
        return sum(entry.quantity for entry in self._entries)

    @property
    def total(self) -> float:
        """Sum of unit price times quantity."""
        return sum(entry.line_total for entry in self._entries)

    @property
    def summary(self) -> OrderSummary:
        return calculate_summary(self._entries)

    def _replace(self, entries: list[CartEntry]) -> None:
        self._entries = list(entries)
        self._state = CollectionState.LOADED

    async def fetch(self) -> None:
        self._state = CollectionState.LOADING
        try:
            entries = await self._client.get_cart()
        except ApiError as e:
            logger.error("Error fetching cart: %s", e.message)
            entries = []
        self._replace(entries)

    async def add(self, artwork_id: int, quantity: int = 1) -> MutationResult:
        try:
            entries = await self._client.add_to_cart(artwork_id, quantity)
        except ApiError as e:
            logger.error("Error adding artwork %s to cart: %s", artwork_id, e.message)
            self._notifier.error("Failed to add to cart")
            return MutationResult.failed(e)

        self._replace(entries)
        self._notifier.success("Added to cart")
        return MutationResult.ok()

    async def set_quantity(self, artwork_id: int, quantity: int) -> MutationResult:
        """
        Set an entry's quantity.

        A quantity of 0 removes the entry server-side. The request is the same
        either way; only the notification text differs.
        """
        try:
            entries = await self._client.update_cart_item(artwork_id, quantity)
        except ApiError as e:
            logger.error("Error updating cart entry %s: %s", artwork_id, e.message)
            self._notifier.error("Failed to update cart")
            return MutationResult.failed(e)

        self._replace(entries)
        self._notifier.success("Removed from cart" if quantity == 0 else "Cart updated")
        return MutationResult.ok()

    async def remove(self, artwork_id: int) -> MutationResult:
        try:
            entries = await self._client.remove_cart_item(artwork_id)
        except ApiError as e:
            logger.error("Error removing artwork %s from cart: %s", artwork_id, e.message)
            self._notifier.error("Failed to remove from cart")
            return MutationResult.failed(e)

        self._replace(entries)
        self._notifier.success("Removed from cart")
        return MutationResult.ok()

    async def clear(self) -> MutationResult:
        """
        Remove every entry, one request at a time.

        Each removal is awaited before the next is sent so only one mutation
        of the server cart is ever in flight. The local cart ends up empty
        whatever the individual outcomes were.
        """
        failures = 0
        for entry in list(self._entries):
            result = await self.remove(entry.artwork_id)
            if not result.success:
                failures += 1

        self._replace([])
        self._notifier.success("Cart cleared")

        if failures:
            logger.warning("Cart cleared locally, %d removal(s) failed", failures)
            return MutationResult.failed(f"{failures} item(s) could not be removed")
        return MutationResult.ok()

    def _handle_logout(self) -> None:
        self._entries = []
        self._state = CollectionState.UNLOADED
