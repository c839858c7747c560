from artmarket.sync.base import CollectionState, Synchronizer
from artmarket.sync.cart import CartSynchronizer
from artmarket.sync.orders import ARTIST_ACTIONS, OrdersSynchronizer, available_actions
from artmarket.sync.wishlist import WishlistSynchronizer

__all__ = [
    "ARTIST_ACTIONS",
    "CartSynchronizer",
    "CollectionState",
    "OrdersSynchronizer",
    "Synchronizer",
    "WishlistSynchronizer",
    "available_actions",
]
