"""Operand helpers for glidequery.

Type checks, type labels for error messages, operand rendering and the UTC
date normalization used by comparison and BETWEEN conditions.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Collection

from .constants import LIST_SEPARATOR, NUMBER, STRING
from .exceptions import QueryTypeError
from .types import DateLike

# ===========================================================================
# Type checks
# ===========================================================================


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for int and float. bool is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_scalar(value: Any) -> bool:
    return is_string(value) or is_number(value)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_date_like(value: Any) -> bool:
    return isinstance(value, (datetime, date))


_CHECKS = {
    STRING: is_string,
    NUMBER: is_number,
}


def type_label(value: Any) -> str:
    """Return a readable name for the runtime type of `value`."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_string(value):
        return STRING
    if is_number(value):
        return NUMBER
    if is_date_like(value):
        return "date"
    if is_array(value):
        return "list"
    return type(value).__name__


# ===========================================================================
# Validation and rendering
# ===========================================================================


def validate_type(value: Any, allowed: Collection[str]) -> None:
    """Check that `value` is one of the `allowed` operand types.

    Args:
        value: Scalar operand or a single array element
        allowed: Type labels (`"string"`, `"number"`)

    Raises:
        QueryTypeError: If the runtime type is not allowed. No coercion is attempted.
    """
    if any(_CHECKS[label](value) for label in allowed):
        return
    expected = ", ".join(allowed)
    found = type_label(value)
    if len(allowed) > 1:
        message = f"Invalid type passed. Expected one of: {expected}, found: {found}"
    else:
        message = f"Invalid type passed. Expected: {expected}, found: {found}"
    raise QueryTypeError(message, expected=expected, found=found)


def render_scalar(value: Any) -> str:
    """Render a string or number operand. Integral floats drop the decimal point (1.0 -> 1)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_operand(operand: Any, allowed: Collection[str]) -> str:
    """Validate an operand and render it as it appears in the encoded query.

    Arrays are validated element by element and joined with ``,`` (no quoting
    or escaping). Every element is checked before anything is rendered.
    """
    if is_array(operand):
        for item in operand:
            validate_type(item, allowed)
        return LIST_SEPARATOR.join(render_scalar(item) for item in operand)
    validate_type(operand, allowed)
    return render_scalar(operand)


def to_utc_query_format(value: DateLike) -> str:
    """Convert a date/datetime to UTC and format it for encoded queries.

    2020-01-01T12:12:12.345+00:00 -> 2020-01-01 12:12:12

    Naive datetimes are taken to already be in UTC; a bare `date` is midnight
    UTC. Sub-second precision is truncated.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            try:
                value = value.astimezone(timezone.utc)
            except OverflowError as e:
                raise QueryTypeError(f"Date out of range for UTC conversion: {value.isoformat()}", found="date") from e
    elif isinstance(value, date):
        value = datetime.combine(value, time.min, tzinfo=timezone.utc)
    else:
        raise QueryTypeError(f"Expected date type, found: {type_label(value)}", found=type_label(value))
    return value.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")
