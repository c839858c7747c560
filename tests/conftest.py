import pytest

from artmarket.client import MarketplaceClient
from artmarket.notifications import Notification, Notifier
from artmarket.session import Session
from artmarket.storage import MemoryLocalStore
from payloads import API


@pytest.fixture
def store() -> MemoryLocalStore:
    return MemoryLocalStore()


@pytest.fixture
def session(store: MemoryLocalStore) -> Session:
    return Session(store)


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def notifications(notifier: Notifier) -> list[Notification]:
    """Every notification published during the test, in order."""
    published: list[Notification] = []
    notifier.subscribe(published.append)
    return published


@pytest.fixture
def client(store: MemoryLocalStore) -> MarketplaceClient:
    return MarketplaceClient(store, base_url=API)
