"""Shared fixtures: fake clock, patched asyncio.sleep, HttpClient factory."""

from datetime import datetime
from typing import List
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from samira.riot_api.http_client import HttpClient
from tests.helpers import FakeClock, Router


@pytest.fixture
def clock():
    """Fake clock parked at local noon so no test crosses midnight by accident."""
    return FakeClock(datetime(2024, 6, 15, 12, 0, 0).timestamp() * 1000)


@pytest.fixture
def mock_sleep(clock):
    """Patch asyncio.sleep so it returns at once and advances the fake clock."""

    async def fake_sleep(seconds: float) -> None:
        clock.advance(seconds * 1000)

    with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
        sleep.side_effect = fake_sleep
        yield sleep


@pytest_asyncio.fixture
async def make_client(clock):
    """Factory building HttpClients on top of a Router; closes them afterwards."""
    clients: List[HttpClient] = []

    def _make(router: Router, **kwargs) -> HttpClient:
        kwargs.setdefault("base_url", "https://euw1.api.riotgames.com")
        kwargs.setdefault("api_key", "test_api_key")
        client = HttpClient(transport=router.transport, clock=clock, **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()
