"""
Marketplace facade.

Wires the local store, API client, session, notifier, the three
synchronizers and checkout together, and ties their lifetime to one
``start()`` / ``close()`` pair.
"""

import logging
from types import TracebackType

import httpx

from artmarket.client import MarketplaceClient
from artmarket.config import Settings, settings
from artmarket.notifications import Notifier
from artmarket.services.checkout import CheckoutService
from artmarket.session import Session
from artmarket.storage import FileLocalStore, LocalStore
from artmarket.sync.cart import CartSynchronizer
from artmarket.sync.orders import OrdersSynchronizer
from artmarket.sync.wishlist import WishlistSynchronizer

logger = logging.getLogger(__name__)


class Marketplace:
    """
    Client-side marketplace state.

    Example:
        async with Marketplace() as market:
            await market.session.log_in(token, Role.COLLECTOR)
            await market.cart.add(42)
            print(market.cart.summary.total)
    """

    def __init__(
        self,
        config: Settings | None = None,
        store: LocalStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or settings
        self.store = store if store is not None else FileLocalStore(self.config.fallback_store_path)
        self.notifier = Notifier()
        self.session = Session(self.store, token_key=self.config.token_storage_key)
        self.client = MarketplaceClient(
            self.store,
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
            token_key=self.config.token_storage_key,
            transport=transport,
        )
        self.cart = CartSynchronizer(self.client, self.session, self.notifier)
        self.wishlist = WishlistSynchronizer(
            self.client,
            self.session,
            self.store,
            storage_key=self.config.wishlist_storage_key,
        )
        self.orders = OrdersSynchronizer(self.client, self.session)
        self.checkout = CheckoutService(
            self.client,
            self.cart,
            self.orders,
            self.notifier,
            currency=self.config.currency,
        )

    async def start(self) -> None:
        """Bind synchronizers to the session and load initial state."""
        for synchronizer in (self.cart, self.wishlist, self.orders):
            await synchronizer.start()
        logger.debug("Marketplace started (logged in: %s)", self.session.is_logged_in)

    def close(self) -> None:
        for synchronizer in (self.cart, self.wishlist, self.orders):
            synchronizer.stop()

    async def __aenter__(self) -> "Marketplace":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
