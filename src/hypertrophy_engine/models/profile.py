"""Frozen user profile: the static physiological inputs for one engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from hypertrophy_engine.models.enums import Sex, TrainingAge


@dataclass(frozen=True)
class UserProfile:
    """Immutable snapshot of a lifter's profile.

    Supplied by the profile store and read-only to the engine. Values are
    not validated: callers supply plausible ranges (stress 1-10, positive
    sleep hours) and the formulas clamp only where their shape does.
    """

    age: int
    sex: Sex
    training_months: float
    sleep_hours: float
    stress_level: float  # 1-10, higher = more stressed
    days_per_week: int = 4
    goal: str = "hypertrophy"
    training_age: TrainingAge = TrainingAge.BEGINNER

    # Per-user base MEV, takes precedence over the engine's table
    base_mev_overrides: tuple[tuple[str, float], ...] = field(default_factory=tuple)

    @property
    def is_female(self) -> bool:
        return self.sex == Sex.FEMALE

    def base_mev_override(self, muscle_group: str) -> float | None:
        """Return this user's base MEV for a group, if they carry one."""
        for group, value in self.base_mev_overrides:
            if group == muscle_group:
                return value
        return None
