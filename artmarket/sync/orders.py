"""
Orders synchronizer.

Read-mostly mirror of the order list the server scopes to the current
session (a Collector's purchases, or the orders placed on an Artist's
artworks). Status changes go to the server and are followed by a full
re-fetch; the client never computes the next status itself and does not
check whether a transition or role is allowed.
"""

import logging

from artmarket.client import MarketplaceClient
from artmarket.models.failure import ApiError
from artmarket.models.order import Order, OrderDetails, OrderStatus
from artmarket.session import Role, Session
from artmarket.sync.base import CollectionState, Synchronizer

logger = logging.getLogger(__name__)

# Transitions offered to an Artist, keyed by the order's current status
ARTIST_ACTIONS: dict[str, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING.value: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING.value: (OrderStatus.SHIPPED,),
}


def available_actions(order: Order, role: Role | str | None) -> list[OrderStatus]:
    """
    Status transitions to offer for an order.

    Only Artists may advance or cancel an order. This gates what is shown;
    the server remains the authority on what is accepted.
    """
    if role != Role.ARTIST:
        return []
    return list(ARTIST_ACTIONS.get(order.status, ()))


class OrdersSynchronizer(Synchronizer):
    name = "orders"

    def __init__(self, client: MarketplaceClient, session: Session) -> None:
        super().__init__(client, session)
        self._orders: list[Order] = []

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    @property
    def count(self) -> int:
        return len(self._orders)

    def get(self, order_id: int) -> Order | None:
        return next((order for order in self._orders if order.id == order_id), None)

    @property
    def in_progress(self) -> list[Order]:
        """Orders that are pending or being processed."""
        active = {OrderStatus.PENDING.value, OrderStatus.PROCESSING.value}
        return [order for order in self._orders if order.status in active]

    @property
    def shipped(self) -> list[Order]:
        return [order for order in self._orders if order.status == OrderStatus.SHIPPED]

    @property
    def delivered(self) -> list[Order]:
        return [order for order in self._orders if order.status == OrderStatus.DELIVERED]

    def available_actions(self, order: Order) -> list[OrderStatus]:
        return available_actions(order, self._session.role)

    async def fetch(self) -> None:
        previous = self._state
        self._state = CollectionState.LOADING
        try:
            orders = await self._client.get_orders()
        except ApiError as e:
            logger.error("Error fetching orders: %s", e.message)
            self._state = previous
            return

        self._orders = orders
        self._state = CollectionState.LOADED

    async def update_status(self, order_id: int, new_status: OrderStatus | str) -> None:
        """
        Ask the server to move an order to a new status, then reload the list.

        Raises:
            ApiError: If the server rejects the transition or is unreachable
        """
        try:
            await self._client.update_order_status(order_id, new_status)
        except ApiError as e:
            logger.error("Error updating order %s status: %s", order_id, e.message)
            raise
        await self.fetch()

    async def fetch_details(self, order_id: int) -> OrderDetails:
        """
        Load payment and delivery state for one order.

        Raises:
            ApiError: If either request fails
        """
        payments = await self._client.get_order_payments(order_id)
        deliveries = await self._client.get_order_deliveries(order_id)
        return OrderDetails(
            payment_status=payments[0].status if payments else OrderStatus.PENDING.value,
            delivery=deliveries[0] if deliveries else None,
        )

    def _handle_logout(self) -> None:
        self._orders = []
        self._state = CollectionState.UNLOADED
