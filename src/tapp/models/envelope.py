"""
Response envelope models shared by the mock API and the client
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel


class EnvelopeStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class SuccessEnvelope(BaseModel):
    status: Literal["success"]
    payload: Any = None


class ErrorEnvelope(BaseModel):
    status: Literal["error"]
    message: str
    payload: Optional[Any] = None


def success_envelope(payload: Any = None) -> Dict[str, Any]:
    """Wrap a payload in a success envelope"""
    return {"status": EnvelopeStatus.SUCCESS.value, "payload": payload}


def error_envelope(message: str, payload: Any = None) -> Dict[str, Any]:
    """Wrap an error message in an error envelope"""
    envelope = {"status": EnvelopeStatus.ERROR.value, "message": message}
    if payload is not None:
        envelope["payload"] = payload
    return envelope


def is_envelope(body: Any) -> bool:
    """True when a decoded response body already follows the envelope contract"""
    return isinstance(body, dict) and body.get("status") in (
        EnvelopeStatus.SUCCESS.value,
        EnvelopeStatus.ERROR.value,
    )
