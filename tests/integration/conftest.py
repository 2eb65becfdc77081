"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from cosmosrest import CosmosClient, Credentials

# Skip all integration tests unless RUN_COSMOSREST_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_COSMOSREST_NETWORK_TESTS") != "1",
    reason="Requires a live account. Set RUN_COSMOSREST_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def live_target():
    """Database and collection ids used by the live tests."""
    return (
        os.environ.get("COSMOS_TEST_DATABASE", "cosmosrest-it"),
        os.environ.get("COSMOS_TEST_COLLECTION", "items"),
    )


@pytest_asyncio.fixture
async def live_client():
    async with CosmosClient(Credentials.from_env()) as client:
        yield client
