"""
Payload validation helpers shared by every creation path.

WHAT: "Required fields present" checks and the integer-format check.

WHY: Request bodies arrive loosely typed (numbers may be sent as strings),
so the services decide what is missing and what is malformed, and report
each case with its own message:
- absent or empty  -> "<field> is required."
- present but bad  -> "<field> must be an integer."

HOW: `coerce_int` is the single integer-format rule. The model validators
for price/overs use it too, so services and models agree on what counts as
an integer.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from store_admin.core.exceptions import InvalidPayloadError


# price, overs and every id live in 32-bit INTEGER columns
INT_COLUMN_MAX = 2**31 - 1
INT_COLUMN_MIN = -(2**31)

# "500", "-3", "500.0", "500." ; the fraction, if any, must be all zeros
_INTEGRAL_TEXT = re.compile(r"([+-]?\d+)(?:\.0*)?")


def is_present(value: Any) -> bool:
    """A value is present unless it is None or a blank string."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """
    Names of required fields that are absent from the payload.

    Args:
        payload: Request data keyed by field name
        required: Field names that must be present

    Returns:
        Missing field names, in the order they were required
    """
    return [field for field in required if not is_present(payload.get(field))]


def require_fields(
    payload: Mapping[str, Any],
    required: Iterable[str],
    description: str,
) -> None:
    """Raise InvalidPayloadError with `description` if any field is missing."""
    missing = missing_fields(payload, required)
    if missing:
        raise InvalidPayloadError(message=description, missing=missing)


def coerce_int(value: Any) -> Optional[int]:
    """
    Convert a value to int only if the conversion loses nothing.

    Accepted: ints, integral floats (6.0), and strings holding a base-10
    integer, optionally with a zero fraction ("500", " 42 ", "-3", "500.0").
    Everything else, including booleans, fractional numbers, exponents,
    empty strings and non-numeric text, yields None.

    Args:
        value: Raw value from a request or attribute assignment

    Returns:
        The integer, or None if the value is not an integer
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = _INTEGRAL_TEXT.fullmatch(value.strip())
        if match is None:
            return None
        try:
            return int(match.group(1), 10)
        except ValueError:
            # Longer than the interpreter's int/str conversion limit
            return None
    return None


def fits_int_column(number: int) -> bool:
    """True if `number` can be stored in (or compared against) an INTEGER column."""
    return INT_COLUMN_MIN <= number <= INT_COLUMN_MAX


def is_integer(value: Any) -> bool:
    return coerce_int(value) is not None


def require_integer(payload: Mapping[str, Any], field: str) -> int:
    """
    Read a required integer field from a payload.

    Raises:
        InvalidPayloadError: "<field> is required." when absent,
            "<field> must be an integer." when malformed
    """
    value = payload.get(field)
    if not is_present(value):
        raise InvalidPayloadError(message=f"{field} is required.", field=field)
    number = coerce_int(value)
    if number is None:
        raise InvalidPayloadError(message=f"{field} must be an integer.", field=field)
    return number


def positive_int(field: str, value: Any) -> int:
    """
    Coerce `value` to a positive integer or raise.

    Used by the model validators, so every write of price/overs goes through
    it regardless of which operation performs the write. Values above the
    INTEGER column range are rejected here rather than at flush time.
    """
    number = coerce_int(value)
    if number is None:
        raise InvalidPayloadError(message=f"{field} must be an integer.", field=field)
    if number <= 0:
        raise InvalidPayloadError(message=f"{field} must be a positive integer.", field=field)
    if number > INT_COLUMN_MAX:
        raise InvalidPayloadError(
            message=f"{field} must be at most {INT_COLUMN_MAX}.",
            field=field,
        )
    return number


def collect_changes(
    data: Mapping[str, Any],
    fields: Iterable[str],
    nullable: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Pick the fields a partial update should touch.

    Keys absent from `data` are left alone. A null value clears the columns
    listed in `nullable` and is ignored for every other field.

    Args:
        data: Update payload keyed by field name
        fields: Fields the update may change
        nullable: Fields that may be set to None

    Returns:
        Field name to new value
    """
    nullable = set(nullable)
    changes = {}
    for field in fields:
        if field not in data:
            continue
        value = data[field]
        if value is None and field not in nullable:
            continue
        changes[field] = value
    return changes
