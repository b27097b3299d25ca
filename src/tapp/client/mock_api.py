"""
Mock API client

Serves the same route surface as the live backend from an in-process
FastAPI app over an httpx ASGI transport, so no server or network is needed.
"""

import logging
from typing import Optional

import httpx

from tapp.app import create_app
from tapp.client.config import ClientConfig
from tapp.client.rest_client import RestClient
from tapp.config.settings import API_PREFIX, AVAILABLE_OFFER_TEMPLATES
from tapp.database.store import MemoryStore, create_store

logger = logging.getLogger(__name__)


class MockAPI(RestClient):
    """RestClient bound to a private in-memory mock backend"""

    def __init__(self, seed: bool = True, store: Optional[MemoryStore] = None):
        self.store = store or create_store(seed=seed, available_templates=AVAILABLE_OFFER_TEMPLATES)
        self.app = create_app(store=self.store)
        transport = httpx.ASGITransport(app=self.app, raise_app_exceptions=False)
        super().__init__(
            config=ClientConfig(api_base_url="http://mock-api", api_prefix=API_PREFIX),
            transport=transport
        )
        logger.debug("Mock API client ready")
