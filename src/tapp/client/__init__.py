"""
API client functions

`api_get` and `api_post` talk to the backend configured through
TAPP_API_BASE_URL; `MockAPI()` offers the same pair against an in-memory
backend.
"""

from typing import Any, Dict, Optional

from tapp.client.config import ClientConfig, get_config
from tapp.client.mock_api import MockAPI
from tapp.client.rest_client import RestClient

_default_client: Optional[RestClient] = None


def get_default_client() -> RestClient:
    """Lazily build the module-level client from the environment"""
    global _default_client
    if _default_client is None:
        _default_client = RestClient(get_config())
    return _default_client


async def api_get(route: str) -> Dict[str, Any]:
    return await get_default_client().api_get(route)


async def api_post(route: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return await get_default_client().api_post(route, data)


__all__ = ["ClientConfig", "MockAPI", "RestClient", "api_get", "api_post", "get_config", "get_default_client"]
