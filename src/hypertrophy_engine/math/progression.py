"""Week-over-week volume progression, deload triggering and RIR ramps."""

from __future__ import annotations

import math
from typing import Mapping

from hypertrophy_engine.math.rounding import round_half_up
from hypertrophy_engine.models.enums import (
    DELOAD_TARGET_RIR,
    DELOAD_TRIGGER_FRACTION,
    DELOAD_VOLUME_FRACTION,
    EXPERIENCED_WEEKLY_PROGRESSION,
    LANDMARK_ADAPTATION_DEFAULT_RATE,
    LANDMARK_ADAPTATION_RATES,
    MAX_RAMP_RIR,
    MIN_SPLIT_MESOCYCLE_WEEKS,
    NOVICE_TAF_THRESHOLD,
    NOVICE_WEEKLY_PROGRESSION,
)
from hypertrophy_engine.models.mesocycle import WeeklyVolume


def progression_rate(training_age_factor: float) -> float:
    """Weekly volume growth: 10% below TAF 1.5, 5% from there on."""
    if training_age_factor < NOVICE_TAF_THRESHOLD:
        return NOVICE_WEEKLY_PROGRESSION
    return EXPERIENCED_WEEKLY_PROGRESSION


def weekly_volume(
    starting_volume: float,
    week_number: int,
    max_volume: float,
    training_age_factor: float,
) -> WeeklyVolume:
    """Target weekly sets for a muscle at a given week of the mesocycle.

    volume = starting_volume * (1 + (week_number - 1) * rate), clamped at
    max_volume. The deload trigger fires once volume reaches 95% of the
    ceiling; the deload volume is always 60% of the starting volume.

    Args:
        starting_volume: Week-1 volume (sets).
        week_number: 1-indexed week within the mesocycle.
        max_volume: Ceiling, typically MAV.
        training_age_factor: TAF selecting the progression rate.

    Returns:
        WeeklyVolume with rounded set counts and the deload signal.
    """
    rate = progression_rate(training_age_factor)
    volume = starting_volume * (1.0 + (week_number - 1) * rate)
    if volume >= max_volume:
        volume = max_volume

    return WeeklyVolume(
        target_volume=round_half_up(volume),
        deload_volume=round_half_up(starting_volume * DELOAD_VOLUME_FRACTION),
        deload_triggered=volume >= max_volume * DELOAD_TRIGGER_FRACTION,
    )


def landmark_adaptation_rate(training_age_factor: float) -> float:
    for upper_bound, rate in LANDMARK_ADAPTATION_RATES:
        if training_age_factor < upper_bound:
            return rate
    return LANDMARK_ADAPTATION_DEFAULT_RATE


def adapt_base_mev(
    base_mev: Mapping[str, float],
    training_age_factor: float,
) -> dict[str, int]:
    """Grow base MEV between mesocycles as the lifter adapts.

    Less experienced lifters adapt faster: 5% below TAF 1.5, 2.5% below
    TAF 2.5, 1% beyond. Returns a new mapping; the input is untouched.
    """
    rate = landmark_adaptation_rate(training_age_factor)
    return {
        muscle: round_half_up(mev * (1.0 + rate))
        for muscle, mev in base_mev.items()
    }


def weekly_target_rir(week: int, total_weeks: int) -> int:
    """Target RIR for a week of a mesocycle whose last week is the deload.

    Ramps 3 -> 2 -> 1 -> 0 across the training weeks; the final week is
    fixed at RIR 4.

    Raises:
        ValueError: If total_weeks < 2 (no room for a ramp and a deload).
    """
    if total_weeks < MIN_SPLIT_MESOCYCLE_WEEKS:
        raise ValueError(
            f"Mesocycle must be at least {MIN_SPLIT_MESOCYCLE_WEEKS} weeks, "
            f"got {total_weeks}"
        )
    if week == total_weeks:
        return DELOAD_TARGET_RIR
    progress = (week - 1) / (total_weeks - 1)
    return max(0, MAX_RAMP_RIR - math.floor(progress * MAX_RAMP_RIR))
