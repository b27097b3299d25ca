"""
Session management API routes
"""

import logging
from fastapi import APIRouter, Depends

from tapp.api.dependencies import get_store
from tapp.database.store import MemoryStore
from tapp.models.envelope import success_envelope
from tapp.models.session import SessionData, SessionRequest, SessionDeleteRequest
from tapp.services.sessions_service import get_sessions_service
from tapp.utils.error_handling import raise_for_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/sessions")
async def list_sessions(store: MemoryStore = Depends(get_store)):
    """List all sessions"""
    result = await get_sessions_service(store).list_sessions()
    raise_for_result(result)
    return success_envelope([SessionData(**s).model_dump() for s in result.data])


@router.post("/sessions")
async def save_session(body: SessionRequest, store: MemoryStore = Depends(get_store)):
    """Create a session, or update the session named by `id`"""
    result = await get_sessions_service(store).save_session(body.model_dump(exclude_unset=True))
    raise_for_result(result)
    return success_envelope(SessionData(**result.data[0]).model_dump())


@router.post("/sessions/delete")
async def delete_session(body: SessionDeleteRequest, store: MemoryStore = Depends(get_store)):
    """Delete a session and everything scoped to it"""
    result = await get_sessions_service(store).delete_session(body.id)
    raise_for_result(result)
    return success_envelope(SessionData(**result.data[0]).model_dump())
