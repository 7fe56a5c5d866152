"""Profile metrics: scalar modifiers derived from a static user profile.

Neither function validates its inputs. The only clamps are the ones the
formula shapes impose (the TAF cap, the age floor, the sleep cap).
"""

from __future__ import annotations

from hypertrophy_engine.models.enums import (
    AGE_MODIFIER_BASE,
    AGE_MODIFIER_DECLINE_PER_YEAR,
    AGE_MODIFIER_FLOOR,
    AGE_MODIFIER_REFERENCE_AGE,
    FEMALE_RECOVERY_MODIFIER,
    SLEEP_MODIFIER_CAP,
    SLEEP_REFERENCE_HOURS,
    TAF_CAP,
    TAF_GAIN_PER_YEAR,
)
from hypertrophy_engine.models.profile import UserProfile


def training_age_factor(profile: UserProfile) -> float:
    """Training Age Factor (TAF).

    TAF = 1 + (training_months / 12) * 0.1, capped at 3.0. Non-decreasing
    in training months and saturating: 20 years of training reaches the cap.

    Args:
        profile: The lifter's profile.

    Returns:
        A factor in [1.0, 3.0] for non-negative training history.
    """
    taf = 1.0 + (profile.training_months / 12.0) * TAF_GAIN_PER_YEAR
    return min(taf, TAF_CAP)


def sex_modifier(profile: UserProfile) -> float:
    return FEMALE_RECOVERY_MODIFIER if profile.is_female else 1.0


def age_modifier(profile: UserProfile) -> float:
    return max(
        AGE_MODIFIER_FLOOR,
        AGE_MODIFIER_BASE
        - (profile.age - AGE_MODIFIER_REFERENCE_AGE) * AGE_MODIFIER_DECLINE_PER_YEAR,
    )


def sleep_modifier(profile: UserProfile) -> float:
    return min(SLEEP_MODIFIER_CAP, profile.sleep_hours / SLEEP_REFERENCE_HOURS)


def stress_modifier(profile: UserProfile) -> float:
    return (10.0 - profile.stress_level) / 10.0


def recovery_capacity_score(profile: UserProfile) -> float:
    """Recovery Capacity Score (RCS).

    Product of a 1.0 base with four modifiers:
        sex:    1.15 for female, else 1.0
        age:    max(0.7, 1.2 - (age - 18) * 0.005)
        sleep:  min(1.2, sleep_hours / 8)
        stress: (10 - stress_level) / 10

    Args:
        profile: The lifter's profile.

    Returns:
        The recovery capacity score (around 0.5-1.5 for typical inputs).
    """
    return (
        1.0
        * sex_modifier(profile)
        * age_modifier(profile)
        * sleep_modifier(profile)
        * stress_modifier(profile)
    )
