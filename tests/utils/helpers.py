"""
Shared helpers for the API contract tests
"""

from typing import Any, Dict, Iterable, Optional

from tapp.client import RestClient
from tests.utils.data_factory import DataFactory

_factory = DataFactory()


def is_success(response: Dict[str, Any]) -> bool:
    return response.get("status") == "success"


def is_error(response: Dict[str, Any]) -> bool:
    return response.get("status") == "error"


def matches_object(actual: Any, expected: Dict[str, Any]) -> bool:
    """True when `actual` is a dict holding every key/value of `expected`"""
    return isinstance(actual, dict) and all(
        key in actual and actual[key] == value for key, value in expected.items()
    )


def contains_object(items: Iterable[Any], expected: Dict[str, Any]) -> bool:
    return any(matches_object(item, expected) for item in items)


def assert_contains_object(items: Iterable[Any], expected: Dict[str, Any]):
    items = list(items)
    assert contains_object(items, expected), f"expected {items} to contain object {expected}"


def assert_not_contains_object(items: Iterable[Any], expected: Dict[str, Any]):
    items = list(items)
    assert not contains_object(items, expected), f"expected {items} not to contain object {expected}"


async def add_session(api: RestClient, **overrides) -> Dict[str, Any]:
    """Create a uniquely named session and return it"""
    response = await api.api_post("/sessions", _factory.session_data(**overrides))
    assert is_success(response), f"Failed to create session: {response}"
    return response["payload"]


async def delete_session(api: RestClient, session: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Delete a session; the envelope is returned unchecked so teardown never fails"""
    if not session:
        return None
    return await api.api_post("/sessions/delete", {"id": session["id"]})


async def add_position(api: RestClient, session: Dict[str, Any], **overrides) -> Dict[str, Any]:
    response = await api.api_post(f"/sessions/{session['id']}/positions", _factory.position_data(**overrides))
    assert is_success(response), f"Failed to create position: {response}"
    return response["payload"]


async def delete_position(api: RestClient, position: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not position:
        return None
    return await api.api_post("/positions/delete", position)
