"""
Instructor management API routes
"""

import logging
from fastapi import APIRouter, Depends

from tapp.api.dependencies import get_store
from tapp.database.store import MemoryStore
from tapp.models.envelope import success_envelope
from tapp.models.instructor import InstructorData, InstructorRequest
from tapp.services.instructors_service import get_instructors_service
from tapp.utils.error_handling import raise_for_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/instructors")
async def list_instructors(store: MemoryStore = Depends(get_store)):
    result = await get_instructors_service(store).list_instructors()
    raise_for_result(result)
    return success_envelope([InstructorData(**i).model_dump() for i in result.data])


@router.post("/instructors")
async def save_instructor(body: InstructorRequest, store: MemoryStore = Depends(get_store)):
    """Create an instructor, or update the instructor named by `id`"""
    result = await get_instructors_service(store).save_instructor(body.model_dump(exclude_unset=True))
    raise_for_result(result)
    return success_envelope(InstructorData(**result.data[0]).model_dump())


@router.post("/instructors/delete")
async def delete_instructor(body: InstructorRequest, store: MemoryStore = Depends(get_store)):
    result = await get_instructors_service(store).delete_instructor(body.id)
    raise_for_result(result)
    return success_envelope(InstructorData(**result.data[0]).model_dump())


@router.get("/sessions/{session_id}/instructors")
async def list_session_instructors(session_id: int, store: MemoryStore = Depends(get_store)):
    result = await get_instructors_service(store).list_for_session(session_id)
    raise_for_result(result)
    return success_envelope([InstructorData(**i).model_dump() for i in result.data])


@router.post("/sessions/{session_id}/instructors/delete")
async def remove_session_instructor(
    session_id: int,
    body: InstructorRequest,
    store: MemoryStore = Depends(get_store)
):
    """Detach an instructor from every position of a session"""
    result = await get_instructors_service(store).remove_from_session(session_id, body.id)
    raise_for_result(result)
    return success_envelope(InstructorData(**result.data[0]).model_dump())
