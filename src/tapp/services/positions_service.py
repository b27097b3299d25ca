"""
Positions service - business logic for course positions within a session
"""

import logging
from typing import Dict, Any, Optional

from tapp.database.store import MemoryStore
from tapp.services.base_service import (
    BaseService, ServiceResult, is_blank, VALIDATION_ERROR, NOT_FOUND, CONFLICT_ERROR
)

logger = logging.getLogger(__name__)


class PositionsService(BaseService):
    """Service for position management; position codes are unique per session"""

    fields = (
        "position_code",
        "position_title",
        "est_hours_per_assignment",
        "est_start_date",
        "est_end_date",
        "position_type",
    )
    label = "Position"

    def __init__(self, store: MemoryStore):
        super().__init__(store, "positions")

    def _check_code(self, session_id: int, code: Any, exclude_id: Optional[int] = None) -> Optional[ServiceResult]:
        if is_blank(code):
            return ServiceResult.fail("Position code cannot be empty", VALIDATION_ERROR)
        clash = [
            position for position in self.store.filter("positions", session_id=session_id, position_code=code)
            if position["id"] != exclude_id
        ]
        if clash:
            return ServiceResult.fail(
                f"Position code '{code}' already exists in session {session_id}",
                CONFLICT_ERROR
            )
        return None

    async def list_for_session(self, session_id: int) -> ServiceResult:
        if not self.store.exists("sessions", session_id):
            return ServiceResult.fail(f"Session with id {session_id} does not exist", NOT_FOUND)
        return await self.read({"session_id": session_id})

    async def create_position(self, session_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Create a position in a session

        Args:
            session_id: Owning session, must exist
            data: Position fields; position_code is required

        Returns:
            ServiceResult with the created position
        """
        if not self.store.exists("sessions", session_id):
            return ServiceResult.fail(f"Session with id {session_id} does not exist", NOT_FOUND)

        failure = self._check_code(session_id, data.get("position_code"))
        if failure:
            logger.warning(f"Rejected position create in session {session_id}: {failure.error}")
            return failure

        logger.info(f"Creating position {data['position_code']} in session {session_id}")
        return await self.create(data, session_id=session_id, instructor_ids=[])

    async def update_position(self, data: Dict[str, Any]) -> ServiceResult:
        position_id = data.get("id")
        existing = await self.get_by_id(position_id)
        if not existing.success:
            return existing

        if "position_code" in data:
            position = existing.data[0]
            failure = self._check_code(position["session_id"], data["position_code"], exclude_id=position_id)
            if failure:
                logger.warning(f"Rejected position {position_id} update: {failure.error}")
                return failure
        return await self.update(position_id, data)

    async def delete_position(self, position_id: Optional[int]) -> ServiceResult:
        return await self.delete(position_id)

    async def add_instructor(self, position_id: int, instructor_id: Optional[int]) -> ServiceResult:
        """
        Attach an instructor to a position; attaching twice is a no-op

        Returns:
            ServiceResult with the instructor record
        """
        position = await self.get_by_id(position_id)
        if not position.success:
            return position
        if instructor_id is None:
            return ServiceResult.fail("Instructor id is required", VALIDATION_ERROR)
        instructor = self.store.get("instructors", instructor_id)
        if instructor is None:
            return ServiceResult.fail(f"Instructor with id {instructor_id} does not exist", NOT_FOUND)

        instructor_ids = position.data[0]["instructor_ids"]
        if instructor_id not in instructor_ids:
            self.store.update("positions", position_id, {"instructor_ids": instructor_ids + [instructor_id]})
            logger.info(f"Added instructor {instructor_id} to position {position_id}")
        return ServiceResult.ok([instructor])


def get_positions_service(store: MemoryStore) -> PositionsService:
    """Get a positions service bound to the given store"""
    return PositionsService(store)
