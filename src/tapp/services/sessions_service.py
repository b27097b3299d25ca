"""
Sessions service - business logic for session management
"""

import logging
from typing import Dict, Any, Optional

from tapp.database.store import MemoryStore
from tapp.services.base_service import (
    BaseService, ServiceResult, is_blank, VALIDATION_ERROR, CONFLICT_ERROR
)

logger = logging.getLogger(__name__)


class SessionsService(BaseService):
    """Service for session management operations"""

    fields = ("name", "start_date", "end_date", "rate1", "rate2")
    label = "Session"

    def __init__(self, store: MemoryStore):
        super().__init__(store, "sessions")

    def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            session["name"] == name and session["id"] != exclude_id
            for session in self.store.all("sessions")
        )

    def _check_name(self, name: Any, exclude_id: Optional[int] = None) -> Optional[ServiceResult]:
        if is_blank(name):
            return ServiceResult.fail("Session name cannot be empty", VALIDATION_ERROR)
        if self._name_taken(name, exclude_id):
            return ServiceResult.fail(f"Session name '{name}' is already taken", CONFLICT_ERROR)
        return None

    async def list_sessions(self) -> ServiceResult:
        return await self.read()

    async def save_session(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Create a session, or update one when `data` carries an id

        Args:
            data: Submitted session fields; only these are written

        Returns:
            ServiceResult with the created or updated session
        """
        if data.get("id") is not None:
            return await self.update_session(data["id"], data)
        return await self.create_session(data)

    async def create_session(self, data: Dict[str, Any]) -> ServiceResult:
        failure = self._check_name(data.get("name"))
        if failure:
            logger.warning(f"Rejected session create: {failure.error}")
            return failure
        logger.info(f"Creating new session: {data['name']}")
        return await self.create(data)

    async def update_session(self, session_id: int, data: Dict[str, Any]) -> ServiceResult:
        if "name" in data and self.store.exists("sessions", session_id):
            failure = self._check_name(data["name"], exclude_id=session_id)
            if failure:
                logger.warning(f"Rejected session {session_id} update: {failure.error}")
                return failure
        return await self.update(session_id, data)

    async def delete_session(self, session_id: Optional[int]) -> ServiceResult:
        """Delete a session together with its positions and offer templates"""
        result = await self.delete(session_id)
        if not result.success:
            return result

        for table in ("positions", "position_templates"):
            for record in self.store.filter(table, session_id=session_id):
                self.store.delete(table, record["id"])
        return result


def get_sessions_service(store: MemoryStore) -> SessionsService:
    """Get a sessions service bound to the given store"""
    return SessionsService(store)
