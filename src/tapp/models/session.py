"""
Session-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel


class SessionData(BaseModel):
    id: int
    name: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    rate1: Optional[float] = None
    rate2: Optional[float] = None


class SessionRequest(BaseModel):
    """Body of POST /sessions; an `id` turns the create into an update"""
    id: Optional[int] = None
    name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    rate1: Optional[float] = None
    rate2: Optional[float] = None


class SessionDeleteRequest(BaseModel):
    id: Optional[int] = None
