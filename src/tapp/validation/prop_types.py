"""
Payload shape assertions

Shapes are the pydantic models the API serializes with; `check_prop_types`
validates a decoded payload against one and raises PropTypeError on mismatch.
Extra keys are ignored, as a shape only states what must be present.
"""

from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from tapp.models.envelope import ErrorEnvelope, SuccessEnvelope
from tapp.models.instructor import InstructorData
from tapp.models.offer_template import OfferTemplateData, OfferTemplateMinimal
from tapp.models.position import PositionData
from tapp.models.session import SessionData

session_prop_types = SessionData
offer_template_minimal_prop_types = OfferTemplateMinimal
offer_template_prop_types = OfferTemplateData
position_prop_types = PositionData
instructor_prop_types = InstructorData
error_prop_types = ErrorEnvelope
success_prop_types = SuccessEnvelope


class PropTypeError(AssertionError):
    """A value does not match its declared shape"""

    def __init__(self, message: str, *, errors: Optional[List[dict]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def array_of(shape: Any) -> Any:
    """Shape of a list whose every item matches `shape`"""
    return List[shape]


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def check_prop_types(shape: Any, value: Any, name: str = "value") -> Any:
    """
    Assert that `value` matches `shape`

    Args:
        shape: A shape model, or array_of(shape) for lists
        value: Decoded JSON payload to check
        name: Label used in the failure message

    Returns:
        The value unchanged, so calls can be chained

    Raises:
        PropTypeError: The value does not match the shape
    """
    try:
        TypeAdapter(shape).validate_python(value)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        summary = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}" for err in errors
        )
        raise PropTypeError(
            f"Failed prop type: {name} does not match {_shape_name(shape)} ({summary})",
            errors=errors
        ) from exc
    return value
