from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dealfinder.main import app
from dealfinder.models import Catalog
from dealfinder.repositories.deal import get_catalog

# Fixtures defined outside conftest.py (tests/seeds.py) are only visible once
# registered as a plugin.
pytest_plugins = ["tests.seeds"]


@pytest.fixture
def catalog(seeded_catalog: Catalog) -> Catalog:
    """Catalog served by the client. Parametrize ``catalog`` directly to swap it."""
    return seeded_catalog


@pytest_asyncio.fixture
async def client(catalog: Catalog) -> AsyncIterator[AsyncClient]:
    """HTTP client whose requests see ``catalog`` instead of the bundled file."""
    app.dependency_overrides[get_catalog] = lambda: catalog

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
