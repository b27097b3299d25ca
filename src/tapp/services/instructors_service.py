"""
Instructors service - global instructor records and their position links
"""

import logging
from typing import Dict, Any, Optional

from tapp.database.store import MemoryStore
from tapp.services.base_service import (
    BaseService, ServiceResult, is_blank, VALIDATION_ERROR, NOT_FOUND, CONFLICT_ERROR
)

logger = logging.getLogger(__name__)


class InstructorsService(BaseService):
    """Service for instructor management operations"""

    fields = ("first_name", "last_name", "email", "utorid")
    label = "Instructor"

    def __init__(self, store: MemoryStore):
        super().__init__(store, "instructors")

    def _check_utorid(self, utorid: Any, exclude_id: Optional[int] = None) -> Optional[ServiceResult]:
        if is_blank(utorid):
            return ServiceResult.fail("Instructor utorid cannot be empty", VALIDATION_ERROR)
        clash = [i for i in self.store.filter("instructors", utorid=utorid) if i["id"] != exclude_id]
        if clash:
            return ServiceResult.fail(f"Instructor with utorid '{utorid}' already exists", CONFLICT_ERROR)
        return None

    def _detach(self, instructor_id: int, session_id: Optional[int] = None) -> int:
        """Remove an instructor from positions, optionally only those of one session"""
        criteria = {"session_id": session_id} if session_id is not None else {}
        detached = 0
        for position in self.store.filter("positions", **criteria):
            if instructor_id in position["instructor_ids"]:
                remaining = [i for i in position["instructor_ids"] if i != instructor_id]
                self.store.update("positions", position["id"], {"instructor_ids": remaining})
                detached += 1
        return detached

    async def list_instructors(self) -> ServiceResult:
        return await self.read()

    async def list_for_session(self, session_id: int) -> ServiceResult:
        """Instructors attached to at least one position of the session"""
        if not self.store.exists("sessions", session_id):
            return ServiceResult.fail(f"Session with id {session_id} does not exist", NOT_FOUND)

        instructor_ids = {
            instructor_id
            for position in self.store.filter("positions", session_id=session_id)
            for instructor_id in position["instructor_ids"]
        }
        instructors = [i for i in self.store.all("instructors") if i["id"] in instructor_ids]
        return ServiceResult.ok(instructors)

    async def save_instructor(self, data: Dict[str, Any]) -> ServiceResult:
        """Create an instructor, or update one when `data` carries an id"""
        instructor_id = data.get("id")
        if instructor_id is not None:
            if "utorid" in data and self.store.exists("instructors", instructor_id):
                failure = self._check_utorid(data["utorid"], exclude_id=instructor_id)
                if failure:
                    return failure
            return await self.update(instructor_id, data)

        failure = self._check_utorid(data.get("utorid"))
        if failure:
            logger.warning(f"Rejected instructor create: {failure.error}")
            return failure
        logger.info(f"Creating instructor {data['utorid']}")
        return await self.create(data)

    async def remove_from_session(self, session_id: int, instructor_id: Optional[int]) -> ServiceResult:
        if not self.store.exists("sessions", session_id):
            return ServiceResult.fail(f"Session with id {session_id} does not exist", NOT_FOUND)
        instructor = await self.get_by_id(instructor_id)
        if not instructor.success:
            return instructor

        detached = self._detach(instructor_id, session_id=session_id)
        logger.info(f"Removed instructor {instructor_id} from {detached} position(s) of session {session_id}")
        return instructor

    async def delete_instructor(self, instructor_id: Optional[int]) -> ServiceResult:
        result = await self.delete(instructor_id)
        if result.success:
            self._detach(instructor_id)
        return result


def get_instructors_service(store: MemoryStore) -> InstructorsService:
    """Get an instructors service bound to the given store"""
    return InstructorsService(store)
