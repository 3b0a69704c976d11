from __future__ import annotations

from datetime import time
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_time_of_day


def to_decimal(value: Any, default: Decimal = Decimal("0")) -> Decimal:
    """Lenient numeric coercion: None, blanks and junk become ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    return d if d.is_finite() else default


def require_positive(
    value: Any,
    field_name: str,
    *,
    places: Optional[Decimal] = None,
    max_value: Optional[Decimal] = None,
) -> Decimal:
    """Positive decimal, optionally rounded to ``places`` and capped at ``max_value``.

    The range check runs after rounding so the stored value is what gets checked.
    """

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not d.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if places is not None:
        try:
            d = d.quantize(places, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValidationError(f"{field_name} is out of range")
    if d <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    if max_value is not None and d > max_value:
        raise ValidationError(f"{field_name} must be at most {max_value}")
    return d


def require_int_range(value: Any, field_name: str, lo: int, hi: int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if not d.is_finite() or d != d.to_integral_value():
        raise ValidationError(f"{field_name} must be a whole number")
    n = int(d)
    if n < lo or n > hi:
        raise ValidationError(f"{field_name} must be between {lo} and {hi}")
    return n


def require_time(value: Any, field_name: str) -> time:
    t = parse_time_of_day(value)
    if t is None:
        raise ValidationError(f"{field_name} must be a valid time (HH:MM)")
    return t


def require_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, str)) and str(value).strip().lower() in {"0", "1", "true", "false"}:
        return str(value).strip().lower() in {"1", "true"}
    raise ValidationError(f"{field_name} must be true or false")
