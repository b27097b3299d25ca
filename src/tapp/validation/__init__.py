from tapp.validation.prop_types import (
    PropTypeError,
    array_of,
    check_prop_types,
    error_prop_types,
    instructor_prop_types,
    offer_template_minimal_prop_types,
    offer_template_prop_types,
    position_prop_types,
    session_prop_types,
    success_prop_types,
)

__all__ = [
    "PropTypeError",
    "array_of",
    "check_prop_types",
    "error_prop_types",
    "instructor_prop_types",
    "offer_template_minimal_prop_types",
    "offer_template_prop_types",
    "position_prop_types",
    "session_prop_types",
    "success_prop_types",
]
