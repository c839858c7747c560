"""
Shared session gate for the collection synchronizers.

Each synchronizer mirrors one server-side collection. On a transition to
logged-in it fetches once; on a transition to logged-out it drops or swaps
its local copy. Subclasses supply ``fetch`` and ``_handle_logout``.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum

from artmarket.client import MarketplaceClient
from artmarket.session import Session

logger = logging.getLogger(__name__)


class CollectionState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


class Synchronizer(ABC):
    """Base class binding a collection to the session lifecycle."""

    name = "collection"

    def __init__(self, client: MarketplaceClient, session: Session) -> None:
        self._client = client
        self._session = session
        self._state = CollectionState.UNLOADED
        self._bound = False

    @property
    def state(self) -> CollectionState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state == CollectionState.LOADING

    async def start(self) -> None:
        """Subscribe to session changes and load according to the current session."""
        if not self._bound:
            self._session.subscribe(self._on_session_change)
            self._bound = True
        await self._on_session_change(self._session)

    def stop(self) -> None:
        """Stop reacting to session changes. Local state is kept as is."""
        if self._bound:
            self._session.unsubscribe(self._on_session_change)
            self._bound = False

    async def _on_session_change(self, session: Session) -> None:
        if session.is_logged_in:
            logger.debug("Session active, fetching %s", self.name)
            await self.fetch()
        else:
            logger.debug("Session inactive, resetting %s", self.name)
            self._handle_logout()

    @abstractmethod
    async def fetch(self) -> None:
        """Replace the local collection with the server's."""

    @abstractmethod
    def _handle_logout(self) -> None:
        """Drop or swap local state after logout."""
