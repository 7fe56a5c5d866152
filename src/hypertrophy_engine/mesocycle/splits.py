"""Weekly split templates selected by training days per week."""

from __future__ import annotations

import logging

from hypertrophy_engine.models.enums import (
    DAY_MUSCLE_GROUPS,
    DEFAULT_SPLIT_DAYS,
    SPLIT_DAY_NAMES,
)
from hypertrophy_engine.models.mesocycle import SplitTemplate

logger = logging.getLogger(__name__)


def day_muscle_groups(day_name: str) -> tuple[str, ...]:
    """Muscle groups trained on a named split day, e.g. "Upper A".

    Matches on the day-name prefix; the trailing variant letter is ignored.
    """
    for prefix, groups in DAY_MUSCLE_GROUPS.items():
        if day_name.startswith(prefix):
            return groups
    raise KeyError(f"No muscle groups defined for split day {day_name!r}")


def split_for_days(days_per_week: int) -> SplitTemplate:
    """Choose a split template for the number of training days.

    3 days: full body; 4: upper/lower; 5 and 6: push/pull/legs. Any other
    count uses the 4-day upper/lower template.
    """
    if days_per_week not in SPLIT_DAY_NAMES:
        logger.warning(
            "No split template for %d days/week; using %d-day template",
            days_per_week,
            DEFAULT_SPLIT_DAYS,
        )
    split_type, day_names = SPLIT_DAY_NAMES.get(
        days_per_week, SPLIT_DAY_NAMES[DEFAULT_SPLIT_DAYS]
    )
    return SplitTemplate(
        split_type=split_type,
        day_names=day_names,
        day_muscle_groups=tuple(day_muscle_groups(name) for name in day_names),
    )


def muscle_frequencies(split: SplitTemplate) -> dict[str, int]:
    """How many days per week each muscle group is trained in a split."""
    counts: dict[str, int] = {}
    for groups in split.day_muscle_groups:
        for group in groups:
            counts[group] = counts.get(group, 0) + 1
    return counts


def tracked_muscle_groups(split: SplitTemplate) -> tuple[str, ...]:
    """Muscle groups trained at least once, in first-appearance order."""
    return tuple(muscle_frequencies(split))
