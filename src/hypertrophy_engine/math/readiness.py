"""Daily recovery and readiness scoring.

Two scoring schemes coexist, one per autoregulation policy:
- an unweighted four-signal recovery score feeding a daily readiness score;
- a fatigue-mask weighted score over five optional inputs, mapped to a
  four-tier adjustment factor.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np

from hypertrophy_engine.config import FatigueMask
from hypertrophy_engine.math.intensity import mean_rir
from hypertrophy_engine.models.enums import (
    ADJUSTMENT_FLOOR_TIER,
    ADJUSTMENT_TIERS,
    DEFAULT_TARGET_RIR,
    FATIGUE_SCORE_DEFAULT,
    FATIGUE_VALUE_MAX,
    FATIGUE_VALUE_MIN,
    LOAD_STEP_FRACTION,
    PERFORMANCE_INDICATOR_OFFSET,
    RIR_TOLERANCE,
    SORENESS_INVERSION_BASE,
)
from hypertrophy_engine.models.exercise import PreviousPerformance
from hypertrophy_engine.models.readiness import (
    AdjustmentFactor,
    FatigueCheckin,
    ReadinessCheckin,
)


def recovery_score(checkin: ReadinessCheckin) -> float:
    """Unweighted mean of sleep, energy, motivation and inverted soreness.

    Soreness is inverted as ``11 - soreness`` so that every term is
    higher-is-better on the same 1-10 scale.
    """
    return (
        checkin.sleep_quality
        + checkin.energy_level
        + checkin.motivation
        + (SORENESS_INVERSION_BASE - checkin.muscle_soreness)
    ) / 4.0


def daily_readiness(recovery: float, performance_indicator: int = 0) -> float:
    """Blend the recovery score with a warm-up performance indicator.

    ``performance_indicator`` is -1, 0 or +1 from the warm-up sets; callers
    without a warm-up signal leave it at 0.
    """
    return (recovery + (performance_indicator + PERFORMANCE_INDICATOR_OFFSET)) / 2.0


def fatigue_mask_score(
    checkin: FatigueCheckin,
    masks: Mapping[str, FatigueMask],
) -> float:
    """Weighted recovery score over the inputs that were supplied.

    Each present value is clamped to [0, 10] and weighted by its mask;
    the sum is divided by the weights actually used, so the weights need
    not sum to 1. With no inputs the score defaults to 7.0.
    """
    supplied = checkin.present()
    used = [name for name in masks if name in supplied]
    if not used:
        return FATIGUE_SCORE_DEFAULT

    values = np.clip(
        [supplied[name] for name in used], FATIGUE_VALUE_MIN, FATIGUE_VALUE_MAX
    )
    weights = np.array([masks[name].weight for name in used])
    if weights.sum() <= 0:
        return FATIGUE_SCORE_DEFAULT
    return float(np.dot(values, weights) / weights.sum())


def below_threshold(
    checkin: FatigueCheckin,
    masks: Mapping[str, FatigueMask],
) -> list[str]:
    """Names of supplied inputs rated under their mask's threshold."""
    supplied = checkin.present()
    return [
        name
        for name, mask in masks.items()
        if name in supplied and supplied[name] < mask.threshold
    ]


def adjustment_factor(score: float) -> AdjustmentFactor:
    """Map a fatigue-mask score onto the four-tier adjustment table.

    >= 8: volume x1.10, intensity x1.05, RIR -1
    >= 6: unchanged
    >= 4: volume x0.85, intensity x0.95, RIR +1
    else: volume x0.70, intensity x0.90, RIR +2
    """
    for minimum, volume, intensity, rir_adjustment in ADJUSTMENT_TIERS:
        if score >= minimum:
            return AdjustmentFactor(volume, intensity, rir_adjustment)
    volume, intensity, rir_adjustment = ADJUSTMENT_FLOOR_TIER
    return AdjustmentFactor(volume, intensity, rir_adjustment)


def performance_modifier(previous: PreviousPerformance) -> float:
    """Load multiplier from the last session's mean RIR vs its target.

    More than one rep easier than targeted: 1.025. More than one rep
    harder: 0.975. Otherwise 1.0. Sets without an effort signal are
    ignored; a session with none gives 1.0.
    """
    avg_rir = mean_rir(previous.sets)
    if avg_rir is None:
        return 1.0
    goal = previous.target_rir if previous.target_rir is not None else DEFAULT_TARGET_RIR
    if avg_rir > goal + RIR_TOLERANCE:
        return 1.0 + LOAD_STEP_FRACTION
    if avg_rir < goal - RIR_TOLERANCE:
        return 1.0 - LOAD_STEP_FRACTION
    return 1.0
