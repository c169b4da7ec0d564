"""Cleaning helpers for values coming out of the tracker."""

import math

VALID_DIRECTIONS = ("left", "right")


def clean_label(value: object) -> str | None:
    """Trim and collapse whitespace in a free-text label.

    Examples:
        >>> clean_label("  Riverside   Hawks ")
        'Riverside Hawks'
        >>> clean_label("   ") is None
        True
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    label = " ".join(str(value).split())
    return label or None


def normalize_direction(direction: object) -> str | None:
    """Normalize an attacking direction to 'left' / 'right'.

    Anything unrecognized becomes None so the aggregator can fall back to
    its default.
    """
    if direction is None:
        return None
    value = str(direction).strip().lower()
    return value if value in VALID_DIRECTIONS else None


def to_bool(value: object) -> bool:
    """Coerce database/JSON booleans (bool, 0/1, 't'/'f', 'true'/'false')."""
    if isinstance(value, str):
        return value.strip().lower() in ("t", "true", "1", "yes")
    if value is None:
        return False
    # NaN from pandas is truthy, treat it as missing
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_int(value: object, default: int = 0) -> int:
    """Coerce a count column to int, falling back to ``default``."""
    try:
        return int(value)  # type: ignore[call-overload]
    except (ValueError, TypeError):
        return default


def to_float(value: object) -> float | None:
    """Coerce a coordinate to float, or None when missing or unparseable."""
    if value is None:
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (ValueError, TypeError):
        return None
    return None if math.isnan(number) else number
