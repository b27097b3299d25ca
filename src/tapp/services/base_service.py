"""
Base service layer for in-memory record operations
"""

import logging
from typing import Dict, Any, List, Optional, Sequence
from dataclasses import dataclass

from tapp.database.store import MemoryStore

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
CONFLICT_ERROR = "CONFLICT_ERROR"


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, data: List[Dict[str, Any]]) -> "ServiceResult":
        return cls(success=True, data=data, count=len(data))

    @classmethod
    def fail(cls, error: str, error_type: str) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type)


def is_blank(value: Any) -> bool:
    """None, empty and whitespace-only strings all count as missing"""
    return value is None or (isinstance(value, str) and not value.strip())


class BaseService:
    """Base service wrapping one store table with the common CRUD operations"""

    # Writable fields of the resource; anything else in a request is ignored
    fields: Sequence[str] = ()
    label: str = "Record"

    def __init__(self, store: MemoryStore, resource_name: str):
        self.store = store
        self.resource_name = resource_name

    def _pick(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in data.items() if k in self.fields}

    def _not_found(self, record_id: Any) -> ServiceResult:
        return ServiceResult.fail(f"{self.label} with id {record_id} does not exist", NOT_FOUND)

    def _missing_id(self) -> ServiceResult:
        return ServiceResult.fail(f"{self.label} id is required", VALIDATION_ERROR)

    async def create(self, data: Dict[str, Any], **attached: Any) -> ServiceResult:
        """
        Create a new record

        Args:
            data: Field values; writable fields not supplied are stored as None
            attached: Server-controlled values such as the owning session id

        Returns:
            ServiceResult with the created record
        """
        values = {field: None for field in self.fields}
        values.update(self._pick(data))
        values.update(attached)
        record = self.store.insert(self.resource_name, values)
        logger.info(f"Created {self.resource_name} record {record['id']}")
        return ServiceResult.ok([record])

    async def read(self, filters: Optional[Dict[str, Any]] = None) -> ServiceResult:
        """Read all records matching simple equality filters"""
        records = self.store.filter(self.resource_name, **(filters or {}))
        return ServiceResult.ok(records)

    async def get_by_id(self, record_id: Optional[int]) -> ServiceResult:
        if record_id is None:
            return self._missing_id()
        record = self.store.get(self.resource_name, record_id)
        if record is None:
            return self._not_found(record_id)
        return ServiceResult.ok([record])

    async def update(self, record_id: Optional[int], data: Dict[str, Any]) -> ServiceResult:
        """Update only the supplied writable fields of an existing record"""
        if record_id is None:
            return self._missing_id()
        if not self.store.exists(self.resource_name, record_id):
            return self._not_found(record_id)
        updates = self._pick(data)
        record = self.store.update(self.resource_name, record_id, updates)
        logger.info(f"Updated {self.resource_name} record {record_id}")
        return ServiceResult.ok([record])

    async def delete(self, record_id: Optional[int]) -> ServiceResult:
        """Delete an existing record; a missing or unknown id is an error"""
        if record_id is None:
            return self._missing_id()
        if not self.store.exists(self.resource_name, record_id):
            return self._not_found(record_id)
        record = self.store.delete(self.resource_name, record_id)
        logger.info(f"Deleted {self.resource_name} record {record_id}")
        return ServiceResult.ok([record])
