"""Age-predicted max heart rate and %max-HR training zones.

Zone model: four bands of max HR (40-50, 50-60, 60-80, 80-90 %), with the
aerobic 60-80 % band as the default workout target.
"""

from __future__ import annotations

import math
from typing import Sequence

from cardio_engine.models.enums import (
    MAX_AGE,
    MAX_HR_BASE,
    MIN_AGE,
    ZONE_DEFINITIONS,
    Gender,
)
from cardio_engine.models.zone import HeartRateZone


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's built-in ``round`` uses banker's rounding (``round(92.5) == 92``);
    zone bounds are expected to round 92.5 up to 93.
    """
    return int(math.floor(value + 0.5))


def calculate_max_hr(age: int, gender: Gender | str) -> int:
    """Estimate maximum heart rate from age and gender.

    Args:
        age: Age in years, 18-100 inclusive.
        gender: ``Gender`` or its value (``"M"`` / ``"F"``).

    Returns:
        Max HR in BPM: 220 - age for men, 226 - age for women.

    Raises:
        ValueError: If age is out of range or gender is unknown.
    """
    if not MIN_AGE <= age <= MAX_AGE:
        raise ValueError(f"age must be between {MIN_AGE} and {MAX_AGE}, got {age}")
    try:
        gender = Gender(gender)
    except ValueError:
        raise ValueError(f"unknown gender: {gender!r}") from None
    return MAX_HR_BASE[gender] - age


def calculate_zones(
    age: int, gender: Gender | str
) -> tuple[int, tuple[HeartRateZone, ...]]:
    """Calculate max HR and the four training zones.

    Returns:
        ``(max_hr, zones)`` with zones in ascending intensity order.
    """
    max_hr = calculate_max_hr(age, gender)
    return max_hr, zones_for_max_hr(max_hr)


def zones_for_max_hr(max_hr: int) -> tuple[HeartRateZone, ...]:
    """Build the zone table for an already-known max HR."""
    zones: list[HeartRateZone] = []
    for (
        identifier, name, min_pct, max_pct,
        description, duration, goal, color, text_color, is_target,
    ) in ZONE_DEFINITIONS:
        zones.append(
            HeartRateZone(
                identifier=identifier,
                name=name,
                min_percent=min_pct,
                max_percent=max_pct,
                min_bpm=round_half_up(max_hr * min_pct),
                max_bpm=round_half_up(max_hr * max_pct),
                description=description,
                duration=duration,
                goal=goal,
                color=color,
                text_color=text_color,
                is_target=is_target,
            )
        )
    return tuple(zones)


def select_target_zone(zones: Sequence[HeartRateZone]) -> HeartRateZone | None:
    """Return the zone flagged as target, falling back to the first zone."""
    for zone in zones:
        if zone.is_target:
            return zone
    return zones[0] if zones else None
