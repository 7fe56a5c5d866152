"""Shared test fixtures: lifter profiles, planned workouts, daily check-ins."""

from __future__ import annotations

from typing import Callable

import pytest

from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.engine import PeriodizationEngine
from hypertrophy_engine.models.enums import ExerciseType, Sex, TrainingAge
from hypertrophy_engine.models.exercise import CompletedSet, Exercise, Workout
from hypertrophy_engine.models.profile import UserProfile
from hypertrophy_engine.models.readiness import FatigueCheckin, ReadinessCheckin


@pytest.fixture
def reference_profile() -> UserProfile:
    """18-year-old first-timer: TAF 1.0, RCS 0.6 (age 1.2 x stress 0.5)."""
    return UserProfile(
        age=18,
        sex=Sex.MALE,
        training_months=0,
        sleep_hours=8.0,
        stress_level=5,
        days_per_week=4,
        training_age=TrainingAge.BEGINNER,
    )


@pytest.fixture
def novice_female() -> UserProfile:
    """25-year-old woman, 6 months of training, sleeping 7.5 h."""
    return UserProfile(
        age=25,
        sex=Sex.FEMALE,
        training_months=6,
        sleep_hours=7.5,
        stress_level=4,
        days_per_week=3,
        training_age=TrainingAge.NOVICE,
    )


@pytest.fixture
def advanced_male() -> UserProfile:
    """40-year-old with 12 years of training (TAF 2.2), 5 days a week."""
    return UserProfile(
        age=40,
        sex=Sex.MALE,
        training_months=144,
        sleep_hours=7.0,
        stress_level=3,
        days_per_week=5,
        training_age=TrainingAge.ADVANCED,
    )


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def reference_engine(reference_profile: UserProfile) -> PeriodizationEngine:
    return PeriodizationEngine(reference_profile)


@pytest.fixture
def push_workout() -> Workout:
    """A planned push session: two compounds and one isolation."""
    return Workout(
        name="Push",
        exercises=(
            Exercise(
                name="Bench Press",
                target_sets=4,
                target_reps=10,
                target_load=100.0,
                target_rir=2,
                muscle_group="chest",
            ),
            Exercise(
                name="Overhead Press",
                target_sets=3,
                target_reps=8,
                target_load=50.0,
                target_rir=2,
                muscle_group="shoulders",
            ),
            Exercise(
                name="Lateral Raise",
                target_sets=3,
                target_reps=6,
                target_load=10.0,
                exercise_type=ExerciseType.ISOLATION,
                muscle_group="shoulders",
            ),
        ),
    )


@pytest.fixture
def rested_checkin() -> ReadinessCheckin:
    """Perfect day: recovery 10, readiness 10."""
    return ReadinessCheckin(sleep_quality=10, energy_level=10, motivation=10, muscle_soreness=1)


@pytest.fixture
def exhausted_checkin() -> ReadinessCheckin:
    """Bad day: recovery 2.0, readiness 6.0 at the low band edge."""
    return ReadinessCheckin(sleep_quality=2, energy_level=2, motivation=2, muscle_soreness=9)


@pytest.fixture
def fatigue_checkin() -> FatigueCheckin:
    """All five inputs supplied, sleep under its threshold."""
    return FatigueCheckin(sleep=5, stress=8, soreness=7, motivation=8, lifestyle=7)


@pytest.fixture
def sets_factory() -> Callable[..., tuple[CompletedSet, ...]]:
    """Factory fixture for logged sets with a uniform effort rating.

    Usage:
        sets = sets_factory(rir=2, count=3)
    """

    def factory(
        rir: float | None = None,
        rpe: float | None = None,
        reps: int = 10,
        weight: float = 100.0,
        count: int = 3,
    ) -> tuple[CompletedSet, ...]:
        return tuple(
            CompletedSet(reps=reps, weight=weight, rpe=rpe, rir=rir) for _ in range(count)
        )

    return factory
