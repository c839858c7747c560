"""
Wishlist synchronizer.

Dual-mode:

- logged out: the local fallback store is the only source of truth
- logged in: the server is authoritative; the fallback store is not read,
  but a failed remote write falls through to the local path and persists
  the whole wishlist there

A successful remote write does not touch the fallback store, so after a
logout the local copy can lag behind the server. Nothing reconciles the two.
"""

import json
import logging

from pydantic import TypeAdapter, ValidationError

from artmarket.client import MarketplaceClient
from artmarket.config import settings
from artmarket.models.artwork import Artwork
from artmarket.models.failure import ApiError
from artmarket.session import Session
from artmarket.storage import LocalStore
from artmarket.sync.base import CollectionState, Synchronizer

logger = logging.getLogger(__name__)

_ARTWORKS = TypeAdapter(list[Artwork])


class WishlistSynchronizer(Synchronizer):
    name = "wishlist"

    def __init__(
        self,
        client: MarketplaceClient,
        session: Session,
        store: LocalStore,
        storage_key: str | None = None,
    ) -> None:
        super().__init__(client, session)
        self._store = store
        self._storage_key = storage_key or settings.wishlist_storage_key
        self._items: list[Artwork] = []

    @property
    def items(self) -> list[Artwork]:
        return list(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def total_value(self) -> float:
        return sum(artwork.price for artwork in self._items)

    def contains(self, artwork_id: int) -> bool:
        return any(artwork.id == artwork_id for artwork in self._items)

    # -------------------------------------------------------------------------
    # Fallback store
    # -------------------------------------------------------------------------

    def _read_fallback(self) -> list[Artwork]:
        raw = self._store.get_item(self._storage_key)
        if not raw:
            return []
        try:
            return _ARTWORKS.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("Ignoring unreadable local wishlist: %s", e)
            return []

    def _write_fallback(self) -> None:
        payload = [artwork.model_dump() for artwork in self._items]
        self._store.set_item(self._storage_key, json.dumps(payload))

    def _load_fallback(self) -> None:
        self._items = self._read_fallback()
        self._state = CollectionState.LOADED

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def fetch(self) -> None:
        self._state = CollectionState.LOADING

        if not self._session.is_logged_in:
            self._load_fallback()
            return

        try:
            items = await self._client.get_wishlist()
        except ApiError as e:
            logger.error("Error fetching wishlist, using local copy: %s", e.message)
            self._load_fallback()
            return

        self._items = items
        self._state = CollectionState.LOADED

    async def add(self, artwork: Artwork) -> None:
        if self._session.is_logged_in:
            try:
                self._items = await self._client.add_to_wishlist(artwork.id)
                self._state = CollectionState.LOADED
                return
            except ApiError as e:
                logger.error("Error adding to remote wishlist, saving locally: %s", e.message)

        self._items = [*self._items, artwork]
        self._write_fallback()

    async def remove(self, artwork_id: int) -> None:
        if self._session.is_logged_in:
            try:
                self._items = await self._client.remove_from_wishlist(artwork_id)
                self._state = CollectionState.LOADED
                return
            except ApiError as e:
                logger.error("Error removing from remote wishlist, saving locally: %s", e.message)

        self._items = [artwork for artwork in self._items if artwork.id != artwork_id]
        self._write_fallback()

    def _handle_logout(self) -> None:
        self._load_fallback()
