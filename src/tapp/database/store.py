"""
In-memory record store backing the mock API
"""

import copy
import itertools
import logging
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

TABLES = ("sessions", "position_templates", "positions", "instructors")


class MemoryStore:
    """
    Process-local tables of plain dict records keyed by a server-assigned
    integer id. Records handed out are copies, so callers cannot mutate the
    store behind its back.
    """

    def __init__(self, available_templates: Optional[Iterable[str]] = None):
        self.tables: Dict[str, Dict[int, Dict[str, Any]]] = {name: {} for name in TABLES}
        self._id_counters = {name: itertools.count(1) for name in TABLES}
        self.available_templates: List[str] = list(available_templates or [])

    def _table(self, table: str) -> Dict[int, Dict[str, Any]]:
        if table not in self.tables:
            raise KeyError(f"Unknown table: {table}")
        return self.tables[table]

    def insert(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a record and return it with its freshly assigned id"""
        record_id = next(self._id_counters[table])
        record = {"id": record_id, **copy.deepcopy(values)}
        self._table(table)[record_id] = record
        logger.debug(f"Inserted {table} record {record_id}")
        return copy.deepcopy(record)

    def get(self, table: str, record_id: Optional[int]) -> Optional[Dict[str, Any]]:
        record = self._table(table).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def exists(self, table: str, record_id: Optional[int]) -> bool:
        return record_id in self._table(table)

    def all(self, table: str) -> List[Dict[str, Any]]:
        """All records of a table in insertion order"""
        return [copy.deepcopy(record) for record in self._table(table).values()]

    def filter(self, table: str, **criteria: Any) -> List[Dict[str, Any]]:
        return [
            record for record in self.all(table)
            if all(record.get(field) == value for field, value in criteria.items())
        ]

    def update(self, table: str, record_id: int, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Apply updates to an existing record; the id itself never changes"""
        record = self._table(table)[record_id]
        record.update({k: copy.deepcopy(v) for k, v in updates.items() if k != "id"})
        logger.debug(f"Updated {table} record {record_id}: {sorted(updates)}")
        return copy.deepcopy(record)

    def delete(self, table: str, record_id: int) -> Dict[str, Any]:
        record = self._table(table).pop(record_id)
        logger.debug(f"Deleted {table} record {record_id}")
        return record


def seed_store(store: MemoryStore) -> MemoryStore:
    """Populate a store with a small, deterministic sample data set"""
    fall = store.insert("sessions", {
        "name": "2018 Fall",
        "start_date": "2018/09/01",
        "end_date": "2018/12/31",
        "rate1": 45.55,
        "rate2": None,
    })
    winter = store.insert("sessions", {
        "name": "2019 Winter",
        "start_date": "2019/01/01",
        "end_date": "2019/04/30",
        "rate1": 45.55,
        "rate2": 46.87,
    })

    smith = store.insert("instructors", {
        "first_name": "Megan",
        "last_name": "Smith",
        "email": "megan.smith@utoronto.ca",
        "utorid": "smithmeg",
    })
    wong = store.insert("instructors", {
        "first_name": "Daniel",
        "last_name": "Wong",
        "email": "daniel.wong@utoronto.ca",
        "utorid": "wongdan",
    })

    for session, instructor, code, title in (
        (fall, smith, "CSC100F", "Introduction to Programming"),
        (fall, wong, "CSC148F", "Introduction to Computer Science"),
        (winter, wong, "CSC148S", "Introduction to Computer Science"),
    ):
        store.insert("positions", {
            "session_id": session["id"],
            "position_code": code,
            "position_title": title,
            "est_hours_per_assignment": 60.0,
            "est_start_date": session["start_date"],
            "est_end_date": session["end_date"],
            "position_type": "Standard",
            "instructor_ids": [instructor["id"]],
        })

    for session in (fall, winter):
        store.insert("position_templates", {
            "session_id": session["id"],
            "offer_template": "Standard.html",
            "position_type": "Standard",
        })

    logger.info("Mock store seeded with sample sessions, positions and instructors")
    return store


def create_store(seed: bool = True, available_templates: Optional[Iterable[str]] = None) -> MemoryStore:
    """Create a fresh store, optionally seeded"""
    store = MemoryStore(available_templates=available_templates)
    if seed:
        seed_store(store)
    return store
