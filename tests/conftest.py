"""Shared fixtures for the memory client tests."""

from typing import Optional

import httpx
import pytest
import pytest_asyncio

from fake_server import InMemoryChatStore, create_app
from memory_client.config import MemoryConfig
from memory_client.repositories.remote import MemoryApiClient
from memory_client.services.memory import MemoryClient

BASE_URL = "http://memory.test"


@pytest.fixture
def store() -> InMemoryChatStore:
    return InMemoryChatStore()


@pytest.fixture
def config() -> MemoryConfig:
    return MemoryConfig(base_url=BASE_URL)


@pytest_asyncio.fixture
async def memory_client(store, config):
    """MemoryClient wired to an in-process fake memory server."""
    transport = httpx.ASGITransport(app=create_app(store))
    async with httpx.AsyncClient(transport=transport) as http_client:
        yield MemoryClient(config, http_client=http_client)


@pytest_asyncio.fixture
async def api(memory_client) -> MemoryApiClient:
    return MemoryApiClient(memory_client)


@pytest_asyncio.fixture
async def mock_client(config):
    """Factory for a MemoryClient whose every request is answered by ``handler``."""
    http_clients = []

    def make(handler, client_config: Optional[MemoryConfig] = None) -> MemoryClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return MemoryClient(client_config or config, http_client=http_client)

    yield make

    for http_client in http_clients:
        await http_client.aclose()
