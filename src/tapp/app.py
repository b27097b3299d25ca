"""
TAPP mock API server
In-memory implementation of the course-staffing API route surface
"""

import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tapp.config.settings import API_PREFIX, ALLOWED_ORIGINS, AVAILABLE_OFFER_TEMPLATES, SEED_MOCK_DATA
from tapp.database.store import MemoryStore, create_store
from tapp.api.routes import sessions, position_templates, positions, instructors
from tapp.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(store: Optional[MemoryStore] = None, seed: Optional[bool] = None) -> FastAPI:
    """
    Build a mock API application

    Args:
        store: Store to serve from; a fresh one is created when omitted
        seed: Seed a freshly created store with sample data (default: SEED_MOCK_DATA)
    """
    app = FastAPI(
        title="TAPP Mock API",
        description="In-memory stand-in for the TAPP sessions, positions, instructors and offer template API",
        version="1.0.0",
    )

    if store is None:
        store = create_store(
            seed=SEED_MOCK_DATA if seed is None else seed,
            available_templates=AVAILABLE_OFFER_TEMPLATES,
        )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(sessions.router, prefix=API_PREFIX, tags=["Sessions"])
    app.include_router(position_templates.router, prefix=API_PREFIX, tags=["Offer Templates"])
    app.include_router(positions.router, prefix=API_PREFIX, tags=["Positions"])
    app.include_router(instructors.router, prefix=API_PREFIX, tags=["Instructors"])

    logger.info(f"Mock API initialized under {API_PREFIX or '/'}")
    return app


# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
