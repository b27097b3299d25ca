"""
Position templates service - offer templates attached to sessions
"""

import logging
from typing import Dict, Any, Optional

from tapp.database.store import MemoryStore
from tapp.services.base_service import (
    BaseService, ServiceResult, is_blank, VALIDATION_ERROR, NOT_FOUND, CONFLICT_ERROR
)

logger = logging.getLogger(__name__)


class PositionTemplatesService(BaseService):
    """
    Offer templates are scoped to a session and keyed by
    (offer_template, position_type). Posting a template whose key already
    exists in the session updates that entry instead of adding a duplicate.
    """

    fields = ("offer_template", "position_type")
    label = "Offer template"

    def __init__(self, store: MemoryStore):
        super().__init__(store, "position_templates")

    def _session_missing(self, session_id: int) -> Optional[ServiceResult]:
        if not self.store.exists("sessions", session_id):
            return ServiceResult.fail(f"Session with id {session_id} does not exist", NOT_FOUND)
        return None

    def _find_by_key(self, session_id: int, offer_template: str, position_type: str) -> Optional[Dict[str, Any]]:
        matches = self.store.filter(
            "position_templates",
            session_id=session_id,
            offer_template=offer_template,
            position_type=position_type,
        )
        return matches[0] if matches else None

    async def list_available(self) -> ServiceResult:
        return ServiceResult.ok([
            {"offer_template": name} for name in self.store.available_templates
        ])

    async def list_for_session(self, session_id: int) -> ServiceResult:
        failure = self._session_missing(session_id)
        if failure:
            return failure
        return await self.read({"session_id": session_id})

    async def save_template(self, session_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Add or update an offer template of a session

        Args:
            session_id: Owning session
            data: offer_template / position_type, plus an id when updating

        Returns:
            ServiceResult with every template of the session after the change
        """
        failure = self._session_missing(session_id)
        if failure:
            return failure

        template_id = data.get("id")
        current: Dict[str, Any] = {}
        if template_id is not None:
            existing = self.store.get("position_templates", template_id)
            if existing is None or existing["session_id"] != session_id:
                return self._not_found(template_id)
            current = existing

        merged = {**{f: current.get(f) for f in self.fields}, **self._pick(data)}
        for field in self.fields:
            if is_blank(merged[field]):
                return ServiceResult.fail(f"Offer template field '{field}' cannot be empty", VALIDATION_ERROR)

        match = self._find_by_key(session_id, merged["offer_template"], merged["position_type"])
        if template_id is not None:
            if match is not None and match["id"] != template_id:
                return ServiceResult.fail(
                    f"Session {session_id} already has template '{merged['offer_template']}' "
                    f"for position type '{merged['position_type']}'",
                    CONFLICT_ERROR
                )
            result = await self.update(template_id, merged)
        elif match is not None:
            logger.info(f"Template key already present in session {session_id}; updating in place")
            result = await self.update(match["id"], merged)
        else:
            result = await self.create(merged, session_id=session_id)

        if not result.success:
            return result
        return await self.read({"session_id": session_id})


def get_position_templates_service(store: MemoryStore) -> PositionTemplatesService:
    """Get a position templates service bound to the given store"""
    return PositionTemplatesService(store)
