"""
Unknown route contract tests
"""

from tapp.validation import check_prop_types, error_prop_types


async def test_unknown_route_get_fails(api):
    resp = await api.api_get("/some_string")

    assert resp["status"] == "error"
    check_prop_types(error_prop_types, resp)


async def test_unknown_route_post_fails(api):
    resp = await api.api_post("/some_string", {"name": "anything"})

    assert resp["status"] == "error"


async def test_unknown_route_with_malformed_id_fails(api):
    resp = await api.api_get("/sessions/not-a-number/positions")

    assert resp["status"] == "error"
