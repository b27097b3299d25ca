"""
Position-related Pydantic models
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class PositionData(BaseModel):
    id: int
    session_id: int
    position_code: str
    position_title: Optional[str] = None
    est_hours_per_assignment: Optional[float] = None
    est_start_date: Optional[str] = None
    est_end_date: Optional[str] = None
    position_type: Optional[str] = None
    instructor_ids: List[int] = Field(default_factory=list)


class PositionRequest(BaseModel):
    """Body of POST /sessions/{id}/positions and POST /positions"""
    id: Optional[int] = None
    position_code: Optional[str] = None
    position_title: Optional[str] = None
    est_hours_per_assignment: Optional[float] = None
    est_start_date: Optional[str] = None
    est_end_date: Optional[str] = None
    position_type: Optional[str] = None


class PositionDeleteRequest(BaseModel):
    id: Optional[int] = None
