"""
Envelope-normalizing REST client for the TAPP API
"""

import logging
from typing import Any, Dict, Optional

import httpx

from tapp.client.config import ClientConfig, get_config
from tapp.models.envelope import error_envelope, is_envelope, success_envelope

logger = logging.getLogger(__name__)


class RestClient:
    """
    Issues requests to named API routes and always resolves to an envelope.

    Logical API failures come back as {"status": "error", "message": ...};
    only transport failures (httpx.TransportError) are raised.
    """

    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_config()
        # Reused for every request, so it must survive AsyncClient.aclose()
        self._transport = transport

    def _url(self, route: str) -> str:
        # A trailing slash would be answered with a redirect, not the route
        route = "/" + route.strip("/")
        return f"{self.config.api_prefix}{route}"

    async def request(self, method: str, route: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a request and normalize the response into an envelope"""
        url = self._url(route)
        logger.debug(f"{method} {url}")

        async with httpx.AsyncClient(
            base_url=self.config.api_base_url,
            transport=self._transport,
            timeout=self.config.timeout
        ) as client:
            if method.upper() == "GET":
                response = await client.get(url)
            elif method.upper() == "POST":
                response = await client.post(url, json=data if data is not None else {})
            else:
                raise ValueError(f"Unsupported method: {method}")

        envelope = self._normalize(response)
        if envelope["status"] == "error":
            logger.warning(f"{method} {route} returned error: {envelope.get('message')}")
        return envelope

    @staticmethod
    def _normalize(response: httpx.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return error_envelope(
                f"HTTP {response.status_code}: response was not JSON",
                payload={"raw_response": response.text[:500]}
            )

        if is_envelope(body):
            if body["status"] == "error" and not isinstance(body.get("message"), str):
                body = {**body, "message": f"HTTP {response.status_code}: no error message supplied"}
            return body

        if response.is_success:
            return success_envelope(body)

        detail = (body.get("message") or body.get("detail")) if isinstance(body, dict) else None
        return error_envelope(f"HTTP {response.status_code}: {detail or response.reason_phrase}")

    async def api_get(self, route: str) -> Dict[str, Any]:
        """Fetch a resource collection or item"""
        return await self.request("GET", route)

    async def api_post(self, route: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Create, update or perform an action, depending on the route"""
        return await self.request("POST", route, data)
