"""Pytest configuration and shared fixtures for tests."""

import httpx
import pytest
import pytest_asyncio

from news_sync import NetworkDataSource
from tests.fakes import BASE_URL, FakeServer


@pytest.fixture
def server():
    return FakeServer()


@pytest_asyncio.fixture
async def source(server):
    client = httpx.AsyncClient(transport=httpx.MockTransport(server.handle))
    yield NetworkDataSource(client, BASE_URL)
    await client.aclose()
