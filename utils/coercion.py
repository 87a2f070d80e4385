import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import ValidationError


def finite_or_none(value: Any) -> Optional[float]:
    """Returns value as a finite float, or None when it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def to_num(value: Any, fallback: float = 0.0) -> float:
    number = finite_or_none(value)
    return fallback if number is None else number


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer with halves going towards +infinity.

    Python's round() uses banker's rounding, which would shift .5 kcal values
    compared with stored results (37.5 must become 38, not 37).
    """
    return int(math.floor(value + 0.5))


def round_half_up_to(value: float, places: int) -> float:
    """Rounds to `places` decimals, breaking ties on the exact binary value upwards."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def as_record_list(value: Any, wrapper_key: Optional[str] = None) -> List[Any]:
    """
    Normalises a loosely shaped collection of records into a list.

    Lists and tuples pass through, a mapping holding `wrapper_key` is unwrapped,
    any other single mapping becomes a one-element list and everything else
    becomes an empty list. Items that are neither mappings nor model instances
    are dropped.
    """
    if value is None:
        return []
    if wrapper_key and isinstance(value, Mapping) and wrapper_key in value:
        return as_record_list(value[wrapper_key])
    if isinstance(value, Mapping):
        items = [value]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    elif hasattr(value, "model_dump"):
        items = [value]
    else:
        return []
    return [item for item in items if isinstance(item, Mapping) or hasattr(item, "model_dump")]


def validate_soft(model_cls, value: Any):
    """
    Validates `value` into `model_cls`, passing instances through unchanged.

    Records that still fail validation are logged and replaced by an empty
    model so the calculation path never raises.
    """
    if isinstance(value, model_cls):
        return value
    if value is None:
        return model_cls()
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    if not isinstance(value, Mapping):
        logging.warning(
            f"Expected a mapping for {model_cls.__name__}, got {type(value).__name__}. Using defaults."
        )
        return model_cls()
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        logging.warning(f"Invalid {model_cls.__name__} record, using defaults: {e}")
        return model_cls()
