"""
Login state shared by the synchronizers.

The Session is written only by the authentication flow (``log_in`` /
``log_out``). Synchronizers read it and subscribe to its transitions;
they never change it.
"""

import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from artmarket.storage import LocalStore

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Marketplace user roles."""

    COLLECTOR = "Collector"
    ARTIST = "Artist"


SessionListener = Callable[["Session"], Awaitable[None]]


class Session:
    """
    Current login state and role.

    The auth token lives in the local store so the API client can read it
    on every request. Listeners are awaited in subscription order, and only
    when ``is_logged_in`` actually changes.
    """

    def __init__(self, store: LocalStore, token_key: str = "token") -> None:
        self._store = store
        self._token_key = token_key
        self._is_logged_in = False
        self._role: Role | None = None
        self._listeners: list[SessionListener] = []

    @property
    def is_logged_in(self) -> bool:
        return self._is_logged_in

    @property
    def role(self) -> Role | None:
        return self._role

    @property
    def token(self) -> str | None:
        return self._store.get_item(self._token_key)

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def log_in(self, token: str, role: Role | str) -> None:
        """Store the token and switch to logged-in."""
        role = Role(role)
        self._store.set_item(self._token_key, token)
        self._role = role
        if self._is_logged_in:
            return
        self._is_logged_in = True
        logger.info("Session logged in as %s", self._role.value)
        await self._notify()

    async def log_out(self) -> None:
        """Drop the token and switch to logged-out."""
        self._store.remove_item(self._token_key)
        self._role = None
        if not self._is_logged_in:
            return
        self._is_logged_in = False
        logger.info("Session logged out")
        await self._notify()

    async def _notify(self) -> None:
        for listener in list(self._listeners):
            await listener(self)
