"""Shared test fixtures."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.em_gateway.store import LedgerStore, get_ledger_store
from src.main import app
from tests.helpers import CLEARED_AT


@pytest.fixture
def store() -> LedgerStore:
    """Fresh, uninitialized store with a fixed clearing clock."""
    return LedgerStore(clock=lambda: CLEARED_AT)


@pytest_asyncio.fixture
async def client(store: LedgerStore) -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to a private LedgerStore."""
    app.dependency_overrides[get_ledger_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
