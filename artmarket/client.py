"""
Marketplace REST client.

Thin async wrapper over the marketplace HTTP API. Every call:

- sends JSON, with a bearer token when one is stored locally
- normalizes transport failures, non-success statuses and malformed bodies
  into ApiError
- maps response bodies into the package's models at this boundary
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from artmarket.config import settings
from artmarket.models.artwork import Artwork
from artmarket.models.cart import CartEntry
from artmarket.models.failure import ApiError, FailureKind
from artmarket.models.order import (
    Delivery,
    Order,
    OrderItem,
    OrderStatus,
    Payment,
    PaymentIntent,
    ShippingDetails,
)
from artmarket.storage import LocalStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CART_ENTRIES = TypeAdapter(list[CartEntry])
_ARTWORKS = TypeAdapter(list[Artwork])
_ORDERS = TypeAdapter(list[Order])
_PAYMENTS = TypeAdapter(list[Payment])
_DELIVERIES = TypeAdapter(list[Delivery])


def _items(data: Any) -> list[Any]:
    """Extract the entry list from ``{items: [...]}`` or a bare list."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        return data.get("items") or []
    return []


def _validate(adapter: TypeAdapter[T], data: Any, endpoint: str) -> T:
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        logger.error("Malformed response from %s: %s", endpoint, e)
        raise ApiError(
            FailureKind.API_ERROR,
            f"Malformed response from {endpoint}",
            status=200,
            details=e.errors(include_url=False),
        ) from e


class MarketplaceClient:
    """
    Client for the marketplace API.

    Reads the auth token from the local store on each request, so logging
    in or out takes effect immediately without rebuilding the client.
    """

    def __init__(
        self,
        store: LocalStore,
        base_url: str | None = None,
        timeout: float | None = None,
        token_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            store: Local store holding the auth token
            base_url: API base URL. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout.
            token_key: Store key of the auth token. Defaults to settings.token_storage_key.
            transport: Optional httpx transport (used to talk to an in-process app)
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._store = store
        self._token_key = token_key or settings.token_storage_key
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._store.get_item(self._token_key)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(self, method: str, endpoint: str, payload: Any = None) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            endpoint: Path starting with ``/api``
            payload: JSON body, if any

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ApiError: On network failure or non-success status
        """
        url = f"{self.base_url}{endpoint}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    method,
                    url,
                    json=payload,
                    headers=self._headers(),
                )
        except httpx.RequestError as e:
            logger.warning("%s %s failed before a response: %s", method, endpoint, e)
            raise ApiError.network(str(e) or None) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            logger.debug("%s %s returned %d", method, endpoint, response.status_code)
            raise ApiError.from_status(response.status_code, data)

        return data

    # -------------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------------

    async def get_cart(self) -> list[CartEntry]:
        data = await self.request("GET", "/api/cart/")
        return _validate(_CART_ENTRIES, _items(data), "/api/cart/")

    async def add_to_cart(self, artwork_id: int, quantity: int = 1) -> list[CartEntry]:
        data = await self.request(
            "POST",
            "/api/cart/",
            {"artworkId": artwork_id, "quantity": quantity},
        )
        return _validate(_CART_ENTRIES, _items(data), "/api/cart/")

    async def update_cart_item(self, artwork_id: int, quantity: int) -> list[CartEntry]:
        endpoint = f"/api/cart/{artwork_id}"
        data = await self.request("PATCH", endpoint, {"quantity": quantity})
        return _validate(_CART_ENTRIES, _items(data), endpoint)

    async def remove_cart_item(self, artwork_id: int) -> list[CartEntry]:
        endpoint = f"/api/cart/{artwork_id}"
        data = await self.request("DELETE", endpoint)
        return _validate(_CART_ENTRIES, _items(data), endpoint)

    # -------------------------------------------------------------------------
    # Wishlist
    # -------------------------------------------------------------------------

    async def get_wishlist(self) -> list[Artwork]:
        data = await self.request("GET", "/api/wishlist/")
        return _validate(_ARTWORKS, _items(data), "/api/wishlist/")

    async def add_to_wishlist(self, artwork_id: int) -> list[Artwork]:
        data = await self.request("POST", "/api/wishlist/", {"artworkId": artwork_id})
        return _validate(_ARTWORKS, _items(data), "/api/wishlist/")

    async def remove_from_wishlist(self, artwork_id: int) -> list[Artwork]:
        endpoint = f"/api/wishlist/{artwork_id}"
        data = await self.request("DELETE", endpoint)
        return _validate(_ARTWORKS, _items(data), endpoint)

    # -------------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------------

    async def get_orders(self) -> list[Order]:
        data = await self.request("GET", "/api/orders")
        return _validate(_ORDERS, _items(data), "/api/orders")

    async def create_order(
        self,
        items: list[OrderItem],
        shipping: ShippingDetails,
        total_amount: float,
    ) -> Order:
        payload = {
            "items": [item.model_dump() for item in items],
            "shipping_details": shipping.model_dump(by_alias=True),
            "total_amount": total_amount,
        }
        data = await self.request("POST", "/api/orders", payload)
        return _validate(TypeAdapter(Order), data, "/api/orders")

    async def update_order_status(self, order_id: int, status: OrderStatus | str) -> None:
        value = status.value if isinstance(status, OrderStatus) else status
        await self.request("PUT", f"/api/orders/{order_id}", {"status": value})

    async def get_order_payments(self, order_id: int) -> list[Payment]:
        endpoint = f"/api/orders/{order_id}/payments"
        data = await self.request("GET", endpoint)
        return _validate(_PAYMENTS, _items(data), endpoint)

    async def get_order_deliveries(self, order_id: int) -> list[Delivery]:
        endpoint = f"/api/orders/{order_id}/deliveries"
        data = await self.request("GET", endpoint)
        return _validate(_DELIVERIES, _items(data), endpoint)

    # -------------------------------------------------------------------------
    # Payments
    # -------------------------------------------------------------------------

    async def create_payment_intent(
        self,
        amount: float,
        currency: str,
        description: str,
    ) -> PaymentIntent:
        data = await self.request(
            "POST",
            "/api/payments/create-intent",
            {"amount": amount, "currency": currency, "description": description},
        )
        return _validate(TypeAdapter(PaymentIntent), data, "/api/payments/create-intent")
