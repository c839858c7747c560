"""
In-process marketplace API for integration tests.

Serves the cart, wishlist, order and payment endpoints from memory and is
mounted through ``httpx.ASGITransport``. Bearer tokens map to fixed accounts;
order status changes are restricted to Artists and to the transitions below.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Header
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

ACCOUNTS = {
    "artist-token": "Artist",
    "collector-token": "Collector",
}

TRANSITIONS = {
    "pending": {"processing", "cancelled"},
    "processing": {"shipped", "cancelled"},
    "shipped": {"delivered"},
}


@dataclass
class MarketState:
    artworks: dict[int, dict[str, Any]] = field(default_factory=dict)
    orders: dict[int, dict[str, Any]] = field(default_factory=dict)
    carts: dict[str, dict[int, int]] = field(default_factory=dict)
    wishlists: dict[str, list[int]] = field(default_factory=dict)
    next_order_id: int = 100

    def add_artwork(self, artwork_id: int, price: float, title: str = "") -> None:
        self.artworks[artwork_id] = {
            "id": artwork_id,
            "title": title or f"Artwork {artwork_id}",
            "price": price,
        }

    def add_order(self, order_id: int, status: str, owner: str = "collector-token") -> None:
        self.orders[order_id] = {"id": order_id, "status": status, "owner": owner, "items": []}


class CartAdd(BaseModel):
    artwork_id: int = Field(alias="artworkId")
    quantity: int = 1


class CartUpdate(BaseModel):
    quantity: int


class WishlistAdd(BaseModel):
    artwork_id: int = Field(alias="artworkId")


class StatusUpdate(BaseModel):
    status: str


class OrderCreate(BaseModel):
    items: list[dict[str, Any]]
    shipping_details: dict[str, Any]
    total_amount: float


class IntentCreate(BaseModel):
    amount: float
    currency: str
    description: str = ""


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"message": message})


def _token(authorization: Annotated[str | None, Header()] = None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization.removeprefix("Bearer ")
    return token if token in ACCOUNTS else None


Caller = Annotated[str | None, Depends(_token)]


def create_app(state: MarketState) -> FastAPI:
    """Build an app serving ``state``."""
    app = FastAPI()

    def cart_body(token: str) -> dict[str, Any]:
        cart = state.carts.get(token, {})
        return {
            "items": [
                {
                    "artwork_id": artwork_id,
                    "quantity": quantity,
                    "artwork": state.artworks[artwork_id],
                }
                for artwork_id, quantity in cart.items()
            ]
        }

    def wishlist_body(token: str) -> dict[str, Any]:
        ids = state.wishlists.get(token, [])
        return {"items": [state.artworks[artwork_id] for artwork_id in ids]}

    def public(order: dict[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in order.items() if key != "owner"}

    # Cart

    @app.get("/api/cart/")
    async def get_cart(token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        return cart_body(token)

    @app.post("/api/cart/")
    async def add_to_cart(body: CartAdd, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        if body.artwork_id not in state.artworks:
            return _error(404, "Artwork not found")
        cart = state.carts.setdefault(token, {})
        cart[body.artwork_id] = cart.get(body.artwork_id, 0) + body.quantity
        return cart_body(token)

    @app.patch("/api/cart/{artwork_id}")
    async def update_cart(artwork_id: int, body: CartUpdate, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        cart = state.carts.setdefault(token, {})
        if body.quantity <= 0:
            cart.pop(artwork_id, None)
        else:
            cart[artwork_id] = body.quantity
        return cart_body(token)

    @app.delete("/api/cart/{artwork_id}")
    async def remove_from_cart(artwork_id: int, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        state.carts.setdefault(token, {}).pop(artwork_id, None)
        return cart_body(token)

    # Wishlist

    @app.get("/api/wishlist/")
    async def get_wishlist(token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        return wishlist_body(token)

    @app.post("/api/wishlist/")
    async def add_to_wishlist(body: WishlistAdd, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        ids = state.wishlists.setdefault(token, [])
        if body.artwork_id not in ids:
            ids.append(body.artwork_id)
        return wishlist_body(token)

    @app.delete("/api/wishlist/{artwork_id}")
    async def remove_from_wishlist(artwork_id: int, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        state.wishlists[token] = [i for i in state.wishlists.get(token, []) if i != artwork_id]
        return wishlist_body(token)

    # Orders

    @app.get("/api/orders")
    async def list_orders(token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        if ACCOUNTS[token] == "Artist":
            return [public(order) for order in state.orders.values()]
        return [public(order) for order in state.orders.values() if order["owner"] == token]

    @app.post("/api/orders", status_code=201)
    async def create_order(body: OrderCreate, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        order_id = state.next_order_id
        state.next_order_id += 1
        state.orders[order_id] = {
            "id": order_id,
            "status": "pending",
            "owner": token,
            "items": body.items,
            "shipping_details": body.shipping_details,
            "total_amount": body.total_amount,
        }
        state.carts[token] = {}
        return public(state.orders[order_id])

    @app.put("/api/orders/{order_id}")
    async def update_order(order_id: int, body: StatusUpdate, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        if ACCOUNTS[token] != "Artist":
            return _error(403, "Only artists can update order status")
        order = state.orders.get(order_id)
        if order is None:
            return _error(404, "Order not found")
        if body.status not in TRANSITIONS.get(order["status"], set()):
            return _error(409, f"Cannot move order from {order['status']} to {body.status}")
        order["status"] = body.status
        return public(order)

    @app.get("/api/orders/{order_id}/payments")
    async def order_payments(order_id: int, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        return []

    @app.get("/api/orders/{order_id}/deliveries")
    async def order_deliveries(order_id: int, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        return []

    # Payments

    @app.post("/api/payments/create-intent")
    async def create_intent(body: IntentCreate, token: Caller) -> Any:
        if token is None:
            return _error(401, "Not authenticated")
        cents = round(body.amount * 100)
        return {"client_secret": f"pi_{cents}_{body.currency}_secret"}

    return app
