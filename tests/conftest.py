"""
Pytest configuration and fixtures for the API contract suite
"""

import os

import pytest
import pytest_asyncio

from tapp.client import MockAPI, RestClient, get_config
from tests.utils.data_factory import DataFactory
from tests.utils.helpers import add_position, add_session, delete_position, delete_session

LIVE_BACKEND_ENV = "TAPP_API_BASE_URL"

API_BACKENDS = ["mock", pytest.param("live", marks=pytest.mark.live)]


@pytest.fixture(params=API_BACKENDS)
def api(request) -> RestClient:
    """
    Client for the backend under test. Every contract test runs once against
    a fresh mock API and once against the live backend when one is configured.
    """
    if request.param == "live":
        if not os.getenv(LIVE_BACKEND_ENV):
            pytest.skip(f"{LIVE_BACKEND_ENV} not set - live backend tests skipped")
        return RestClient(get_config())
    return MockAPI()


@pytest.fixture
def is_live(api) -> bool:
    return not isinstance(api, MockAPI)


@pytest.fixture
def data_factory() -> DataFactory:
    return DataFactory()


@pytest_asyncio.fixture
async def session(api):
    """A session that exists for the duration of one test"""
    created = await add_session(api)
    yield created
    await delete_session(api, created)


@pytest_asyncio.fixture
async def position(api, session):
    """A position in the `session` fixture"""
    created = await add_position(api, session)
    yield created
    await delete_position(api, created)


@pytest_asyncio.fixture
async def instructor(api, data_factory):
    response = await api.api_post("/instructors", data_factory.instructor_data())
    assert response["status"] == "success", f"Failed to create instructor: {response}"
    created = response["payload"]
    yield created
    await api.api_post("/instructors/delete", {"id": created["id"]})


def pytest_collection_modifyitems(config, items):
    """Add markers based on test names and locations"""
    for item in items:
        name = item.name.lower()
        if "unknown_route" in name or "fetch" in name:
            item.add_marker(pytest.mark.smoke)
        if "api" in item.path.parts:
            item.add_marker(pytest.mark.crud)
        item.add_marker(pytest.mark.regression)
