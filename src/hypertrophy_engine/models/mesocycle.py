"""Mesocycle planning models: weekly targets, split days, and the mesocycle."""

from __future__ import annotations

from dataclasses import dataclass, field

from hypertrophy_engine.models.enums import SplitType
from hypertrophy_engine.models.landmarks import VolumeLandmarks


@dataclass(frozen=True)
class WeeklyVolume:
    """Output of the weekly progression planner for one muscle."""

    target_volume: int
    deload_volume: int
    deload_triggered: bool


@dataclass(frozen=True)
class MuscleTarget:
    """One muscle group's prescription for one week."""

    muscle_group: str
    target_volume: int
    target_rpe_compound: float
    target_rpe_isolation: float
    landmarks: VolumeLandmarks
    deload_triggered: bool = False


@dataclass(frozen=True)
class TrainingDay:
    """A named day in a split. Exercise selection is left to the caller."""

    name: str
    muscle_groups: tuple[str, ...]
    target_rir: int | None = None
    is_deload: bool = False


@dataclass(frozen=True)
class SplitTemplate:
    """Weekly training-day template chosen by days per week."""

    split_type: SplitType
    day_names: tuple[str, ...]
    day_muscle_groups: tuple[tuple[str, ...], ...]

    @property
    def days_per_week(self) -> int:
        return len(self.day_names)


@dataclass(frozen=True)
class WeeklyPlan:
    """Per-muscle targets for a single mesocycle week."""

    week_number: int
    muscle_targets: tuple[MuscleTarget, ...] = field(default_factory=tuple)
    is_deload: bool = False
    target_rir: int | None = None
    days: tuple[TrainingDay, ...] = field(default_factory=tuple)

    @property
    def deload_triggered(self) -> bool:
        """True if any muscle reached the deload trigger this week."""
        return any(t.deload_triggered for t in self.muscle_targets)

    @property
    def muscle_groups(self) -> tuple[str, ...]:
        return tuple(t.muscle_group for t in self.muscle_targets)

    @property
    def total_volume(self) -> int:
        return sum(t.target_volume for t in self.muscle_targets)

    def target_for(self, muscle_group: str) -> MuscleTarget:
        """Look up one muscle's target.

        Raises:
            KeyError: If the muscle is not tracked in this week.
        """
        for target in self.muscle_targets:
            if target.muscle_group == muscle_group:
                return target
        raise KeyError(muscle_group)


@dataclass(frozen=True)
class Mesocycle:
    """An immutable multi-week block ending in a deload week.

    Re-planning produces a new Mesocycle; an existing one is never edited.
    """

    weeks: tuple[WeeklyPlan, ...]
    split: SplitTemplate | None = None
    progression_model: str = "double"

    @property
    def deload_week(self) -> WeeklyPlan:
        return self.weeks[-1]

    @property
    def training_weeks(self) -> tuple[WeeklyPlan, ...]:
        """All weeks before the terminal deload."""
        return self.weeks[:-1]

    @property
    def length(self) -> int:
        return len(self.weeks)
