from artmarket.models.artwork import Artwork
from artmarket.models.cart import CartEntry
from artmarket.models.failure import (
    NETWORK_ERROR_MESSAGE,
    ApiError,
    FailureKind,
    MutationResult,
)
from artmarket.models.order import (
    Delivery,
    Order,
    OrderDetails,
    OrderItem,
    OrderStatus,
    Payment,
    PaymentIntent,
    ShippingDetails,
)

__all__ = [
    "NETWORK_ERROR_MESSAGE",
    "ApiError",
    "Artwork",
    "CartEntry",
    "Delivery",
    "FailureKind",
    "MutationResult",
    "Order",
    "OrderDetails",
    "OrderItem",
    "OrderStatus",
    "Payment",
    "PaymentIntent",
    "ShippingDetails",
]
