"""
Offer template Pydantic models
"""

from typing import Optional
from pydantic import BaseModel


class OfferTemplateMinimal(BaseModel):
    """Entry of /available_position_templates"""
    offer_template: str


class OfferTemplateData(BaseModel):
    id: int
    offer_template: str
    position_type: str


class OfferTemplateRequest(BaseModel):
    id: Optional[int] = None
    offer_template: Optional[str] = None
    position_type: Optional[str] = None
