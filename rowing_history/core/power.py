# rowing_history/core/power.py
from __future__ import annotations
from datetime import timedelta

from .errors import InvalidArgument

# Concept2 constant; already normalized to a 500 m split.
POWER_CONSTANT = 2.80
SPLIT_METERS = 500.0


def pace_to_watts(pace: timedelta, distance: float | None = None) -> int:
    """
    Concept2 pace → watts: ``2.80 / (seconds_per_500m / 500) ** 3``.

    ``distance`` is accepted for call-site symmetry with the record values
    and is not used. Rounding is Python's ``round`` (half to even).
    """
    seconds = pace.total_seconds()
    if seconds <= 0:
        raise InvalidArgument(f"pace must be positive, got {pace!r}")
    per_meter = seconds / SPLIT_METERS
    return int(round(POWER_CONSTANT / per_meter ** 3))
