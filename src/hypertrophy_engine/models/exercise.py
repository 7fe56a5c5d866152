"""Exercise, workout and progression records exchanged with the workout store."""

from __future__ import annotations

from dataclasses import dataclass, field

from hypertrophy_engine.models.enums import (
    RPE_SCALE_MAX,
    ExerciseType,
    ProgressionAction,
)


@dataclass(frozen=True)
class CompletedSet:
    """One logged working set. Effort may be recorded as RPE, RIR, or both."""

    reps: int
    weight: float
    rpe: float | None = None
    rir: float | None = None
    feedback: tuple[str, ...] = field(default_factory=tuple)

    @property
    def effective_rir(self) -> float | None:
        """Reps in reserve, inferred as ``10 - rpe`` when only RPE was logged."""
        if self.rir is not None:
            return self.rir
        if self.rpe is not None:
            return RPE_SCALE_MAX - self.rpe
        return None


@dataclass(frozen=True)
class Exercise:
    """A prescribed exercise within a planned session.

    Owned by the workout/session store. The engine returns adjusted
    copies and never mutates an instance it was given.
    """

    name: str
    target_sets: int
    target_reps: int
    target_load: float = 0.0
    target_rir: float | None = None
    target_rpe: float | None = None
    exercise_type: ExerciseType = ExerciseType.COMPOUND
    muscle_group: str | None = None
    stall_count: int = 0  # consecutive sessions without progress
    completed_sets: tuple[CompletedSet, ...] = field(default_factory=tuple)
    notes: str = ""


@dataclass(frozen=True)
class Workout:
    """A single planned training session."""

    name: str
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    adjustment_note: str = ""

    @property
    def total_sets(self) -> int:
        return sum(e.target_sets for e in self.exercises)


@dataclass(frozen=True)
class PreviousPerformance:
    """Last session's logged sets for one exercise, used for load adjustment."""

    sets: tuple[CompletedSet, ...]
    target_rir: float | None = None


@dataclass(frozen=True)
class Progression:
    """Next-session targets derived from a completed session."""

    weight: float
    reps: int
    sets: int
    note: str
    action: ProgressionAction
    stall_count: int = 0
