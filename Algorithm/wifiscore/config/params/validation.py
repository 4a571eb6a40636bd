"""
Range and ordering checks over ScoringValues.

All functions are pure: they inspect a candidate and raise
ValidationError on the first violation found.
"""

from typing import Sequence

from wifiscore.config.params.errors import ValidationError
from wifiscore.config.params.models import (
    ScoringValues,
    MIN_RSSI,
    MAX_RSSI,
    MIN_HORIZON,
    MAX_HORIZON,
    MIN_NUD,
    MAX_NUD,
    MIN_EXPID,
    MAX_EXPID,
    MIN_MINUTES,
    MAX_MINUTES,
)


# Stricter than the platform maximum: thresholds must be negative dBm
RSSI_CEILING = min(MAX_RSSI, -1)


def validate_range(name: str, value: int, low: int, high: int) -> None:
    """Raise ValidationError unless low <= value <= high."""
    if value < low or value > high:
        raise ValidationError(name, value, f"outside [{low}, {high}]")


def validate_rssi_array(name: str, rssi: Sequence[int]) -> None:
    """
    Check an RSSI threshold array.
    
    Each element must lie within the valid signal range and must not be
    below the element before it.
    """
    low = MIN_RSSI
    for i, value in enumerate(rssi):
        validate_range(f"{name}[{i}]", value, low, RSSI_CEILING)
        low = value


def validate_ordered_non_negative_array(name: str, values: Sequence[int]) -> None:
    """Check that an array is non-negative and non-decreasing."""
    low = 0
    for i, value in enumerate(values):
        if value < low:
            raise ValidationError(
                f"{name}[{i}]", value, f"must be >= {low}"
            )
        low = value


def validate_values(values: ScoringValues) -> None:
    """
    Validate a complete parameter set.
    
    Args:
        values: Candidate parameter set
    
    Raises:
        ValidationError: On the first violated invariant
    """
    validate_rssi_array("rssi2", values.rssi2)
    validate_rssi_array("rssi5", values.rssi5)
    validate_rssi_array("rssi6", values.rssi6)
    validate_ordered_non_negative_array("pps", values.pps)
    validate_range("horizon", values.horizon, MIN_HORIZON, MAX_HORIZON)
    validate_range("nud", values.nud, MIN_NUD, MAX_NUD)
    validate_range("expid", values.expid, MIN_EXPID, MAX_EXPID)
    validate_range(
        "last_unmetered_selection_minutes",
        values.last_unmetered_selection_minutes,
        MIN_MINUTES,
        MAX_MINUTES,
    )
    validate_range(
        "last_metered_selection_minutes",
        values.last_metered_selection_minutes,
        MIN_MINUTES,
        MAX_MINUTES,
    )


def is_valid(values: ScoringValues) -> bool:
    """Check a parameter set without raising."""
    try:
        validate_values(values)
    except ValidationError:
        return False
    return True
