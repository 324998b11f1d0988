"""
Required-field validation for request payloads.

Every declared field is checked and every violation is reported, so a
client fixing a form sees all of its problems at once.
"""

from typing import Any, List, Mapping, Sequence, Tuple

from ..errors import ValidationFailed

Field = Tuple[str, str]  # (payload key, human label)

USER_FIELDS: Sequence[Field] = (
    ("firstName", "First Name"),
    ("lastName", "Last Name"),
    ("emailAddress", "Email Address"),
    ("password", "Password"),
)

COURSE_FIELDS: Sequence[Field] = (
    ("title", "Title"),
    ("description", "Description"),
)


def missing_value(value: Any) -> bool:
    """True for None and the empty string."""
    return value is None or value == ""


def validate_required(payload: Mapping[str, Any], fields: Sequence[Field]) -> List[str]:
    """
    Check `fields` against `payload` without short-circuiting.

    Args:
        payload (Mapping[str, Any]): Submitted JSON body (camelCase keys).
        fields (Sequence[Field]): Ordered (key, label) pairs.

    Returns:
        List[str]: One `Please provide a value for "<label>"` per violated
        field, in field order. Empty when the payload is valid.
    """
    return [
        f'Please provide a value for "{label}"'
        for key, label in fields
        if missing_value(payload.get(key))
    ]


def ensure_valid(payload: Mapping[str, Any], fields: Sequence[Field]) -> None:
    """Raise ValidationFailed carrying every message from `validate_required`."""
    errors = validate_required(payload, fields)
    if errors:
        raise ValidationFailed(errors)
