"""
Instructor-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel


class InstructorData(BaseModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    utorid: str


class InstructorRequest(BaseModel):
    """Body of POST /instructors and the instructor delete routes"""
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    utorid: Optional[str] = None


class AddInstructorRequest(BaseModel):
    """Body of POST /positions/{id}/add_instructor"""
    id: Optional[int] = None
    position_id: Optional[int] = None
