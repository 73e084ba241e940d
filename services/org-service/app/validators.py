"""
Input validation for org service identifiers.

Identifiers are 24-character hexadecimal object ids. Validation happens
in the HTTP layer before any lookup runs.
"""

import re
from typing import Optional

from .domain.exceptions import ValidationException

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

# Maximum accepted length for free-text filters
MAX_DESIGNATION_NAME_LENGTH = 100


def is_valid_object_id(value: Optional[str]) -> bool:
    """
    Check whether a value is a well-formed object id.

    Args:
        value: Candidate identifier

    Returns:
        True if value is exactly 24 hexadecimal characters
    """
    if not value or not isinstance(value, str):
        return False
    return bool(OBJECT_ID_PATTERN.match(value))


def validate_object_id(value: Optional[str], field: str) -> str:
    """
    Validate a required identifier.

    Raises:
        ValidationException: If the value is missing or malformed
    """
    if not value:
        raise ValidationException(field, value, f"{field} is required")
    if not is_valid_object_id(value):
        raise ValidationException(field, value, f"{field} must be a valid object id")
    return value


def validate_optional_object_id(value: Optional[str], field: str) -> Optional[str]:
    """Validate an identifier only when it was supplied."""
    if value is None or value == "":
        return None
    return validate_object_id(value, field)


def normalize_designation_name(value: Optional[str]) -> Optional[str]:
    """
    Normalize an optional designation name filter.

    Raises:
        ValidationException: If the name is too long
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if len(value) > MAX_DESIGNATION_NAME_LENGTH:
        raise ValidationException(
            "designationName",
            value,
            f"must be at most {MAX_DESIGNATION_NAME_LENGTH} characters",
        )
    return value
