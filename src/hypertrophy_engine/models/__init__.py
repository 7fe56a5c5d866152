"""Data models for the hypertrophy engine."""

from hypertrophy_engine.models.enums import (
    ExerciseType,
    ProgressionAction,
    Sex,
    SplitType,
    TrainingAge,
)
from hypertrophy_engine.models.exercise import (
    CompletedSet,
    Exercise,
    PreviousPerformance,
    Progression,
    Workout,
)
from hypertrophy_engine.models.landmarks import VolumeLandmarks
from hypertrophy_engine.models.mesocycle import (
    Mesocycle,
    MuscleTarget,
    SplitTemplate,
    TrainingDay,
    WeeklyPlan,
    WeeklyVolume,
)
from hypertrophy_engine.models.profile import UserProfile
from hypertrophy_engine.models.readiness import (
    AdjustmentFactor,
    FatigueCheckin,
    ReadinessCheckin,
)

__all__ = [
    "AdjustmentFactor",
    "CompletedSet",
    "Exercise",
    "ExerciseType",
    "FatigueCheckin",
    "Mesocycle",
    "MuscleTarget",
    "PreviousPerformance",
    "Progression",
    "ProgressionAction",
    "ReadinessCheckin",
    "Sex",
    "SplitTemplate",
    "SplitType",
    "TrainingAge",
    "TrainingDay",
    "UserProfile",
    "VolumeLandmarks",
    "WeeklyPlan",
    "WeeklyVolume",
    "Workout",
]
