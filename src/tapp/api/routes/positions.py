"""
Position management API routes
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from tapp.api.dependencies import get_store
from tapp.database.store import MemoryStore
from tapp.models.envelope import success_envelope
from tapp.models.instructor import InstructorData, AddInstructorRequest
from tapp.models.position import PositionData, PositionRequest, PositionDeleteRequest
from tapp.services.positions_service import get_positions_service
from tapp.utils.error_handling import raise_for_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/sessions/{session_id}/positions")
async def list_session_positions(session_id: int, store: MemoryStore = Depends(get_store)):
    result = await get_positions_service(store).list_for_session(session_id)
    raise_for_result(result)
    return success_envelope([PositionData(**p).model_dump() for p in result.data])


@router.post("/sessions/{session_id}/positions")
async def create_session_position(
    session_id: int,
    body: PositionRequest,
    store: MemoryStore = Depends(get_store)
):
    """Create a position in a session"""
    result = await get_positions_service(store).create_position(
        session_id, body.model_dump(exclude_unset=True)
    )
    raise_for_result(result)
    return success_envelope(PositionData(**result.data[0]).model_dump())


@router.post("/positions")
async def update_position(body: PositionRequest, store: MemoryStore = Depends(get_store)):
    """Update the submitted fields of an existing position"""
    result = await get_positions_service(store).update_position(body.model_dump(exclude_unset=True))
    raise_for_result(result)
    return success_envelope(PositionData(**result.data[0]).model_dump())


@router.post("/positions/delete")
async def delete_position(body: PositionDeleteRequest, store: MemoryStore = Depends(get_store)):
    result = await get_positions_service(store).delete_position(body.id)
    raise_for_result(result)
    return success_envelope(PositionData(**result.data[0]).model_dump())


@router.post("/positions/{position_id}/add_instructor")
async def add_position_instructor(
    position_id: int,
    body: AddInstructorRequest,
    store: MemoryStore = Depends(get_store)
):
    """Attach an existing instructor to a position"""
    if body.position_id is not None and body.position_id != position_id:
        raise HTTPException(
            status_code=400,
            detail=f"position_id {body.position_id} does not match route position {position_id}"
        )
    result = await get_positions_service(store).add_instructor(position_id, body.id)
    raise_for_result(result)
    return success_envelope(InstructorData(**result.data[0]).model_dump())
