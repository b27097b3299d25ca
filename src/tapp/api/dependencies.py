"""
FastAPI dependencies shared by the route modules
"""

from fastapi import Request

from tapp.database.store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """The in-memory store owned by the running application"""
    return request.app.state.store
