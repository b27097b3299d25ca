"""
Offer template API routes
"""

import logging
from fastapi import APIRouter, Depends

from tapp.api.dependencies import get_store
from tapp.database.store import MemoryStore
from tapp.models.envelope import success_envelope
from tapp.models.offer_template import OfferTemplateData, OfferTemplateMinimal, OfferTemplateRequest
from tapp.services.position_templates_service import get_position_templates_service
from tapp.utils.error_handling import raise_for_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/available_position_templates")
async def list_available_templates(store: MemoryStore = Depends(get_store)):
    result = await get_position_templates_service(store).list_available()
    raise_for_result(result)
    return success_envelope([OfferTemplateMinimal(**t).model_dump() for t in result.data])


@router.get("/sessions/{session_id}/position_templates")
async def list_session_templates(session_id: int, store: MemoryStore = Depends(get_store)):
    result = await get_position_templates_service(store).list_for_session(session_id)
    raise_for_result(result)
    return success_envelope([OfferTemplateData(**t).model_dump() for t in result.data])


@router.post("/sessions/{session_id}/add_position_template")
async def add_session_template(
    session_id: int,
    body: OfferTemplateRequest,
    store: MemoryStore = Depends(get_store)
):
    """Add an offer template to a session, or update a matching one in place"""
    result = await get_position_templates_service(store).save_template(
        session_id, body.model_dump(exclude_unset=True)
    )
    raise_for_result(result)
    return success_envelope([OfferTemplateData(**t).model_dump() for t in result.data])
