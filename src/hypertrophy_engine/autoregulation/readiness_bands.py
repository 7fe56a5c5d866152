"""Three-band readiness policy.

Scores the four-signal daily check-in and applies one of three coarse
adjustments: trim volume and reps on a poor day, add a rep on a great
day, otherwise train as planned.
"""

from __future__ import annotations

import dataclasses
from typing import Mapping

from hypertrophy_engine.autoregulation.base import AutoregulationPolicy
from hypertrophy_engine.math.readiness import daily_readiness, recovery_score
from hypertrophy_engine.models.enums import (
    HIGH_READINESS_REP_BONUS,
    HIGH_READINESS_THRESHOLD,
    LOW_READINESS_REP_DROP,
    LOW_READINESS_REP_FLOOR,
    LOW_READINESS_SET_MINIMUM,
    LOW_READINESS_THRESHOLD,
)
from hypertrophy_engine.models.exercise import Exercise, PreviousPerformance, Workout
from hypertrophy_engine.models.readiness import ReadinessCheckin

LOW_READINESS_NOTE = "Readiness is low. Volume reduced by 20% and intensity reduced."
HIGH_READINESS_NOTE = "Feeling great! Increasing intensity slightly."
PLANNED_NOTE = "Workout is as planned."


class ReadinessBandsPolicy(AutoregulationPolicy):
    """Adjusts reps and sets in three readiness bands (<6, 6-8, >8)."""

    policy_id = "readiness_bands"
    version = "1.0.0"
    checkin_type = ReadinessCheckin

    def score(self, checkin: ReadinessCheckin) -> float:
        return daily_readiness(recovery_score(checkin), checkin.performance_indicator)

    def adjust_workout(
        self,
        workout: Workout,
        score: float,
        previous_performance: Mapping[str, PreviousPerformance] | None = None,
    ) -> Workout:
        # Previous performance is not used by this policy
        if score < LOW_READINESS_THRESHOLD:
            exercises = tuple(self._reduce(e) for e in workout.exercises)
            note = LOW_READINESS_NOTE
        elif score > HIGH_READINESS_THRESHOLD:
            exercises = tuple(
                dataclasses.replace(e, target_reps=e.target_reps + HIGH_READINESS_REP_BONUS)
                for e in workout.exercises
            )
            note = HIGH_READINESS_NOTE
        else:
            exercises = tuple(dataclasses.replace(e) for e in workout.exercises)
            note = PLANNED_NOTE

        return dataclasses.replace(workout, exercises=exercises, adjustment_note=note)

    @staticmethod
    def _reduce(exercise: Exercise) -> Exercise:
        sets = exercise.target_sets
        if sets > LOW_READINESS_SET_MINIMUM:
            sets -= 1
        return dataclasses.replace(
            exercise,
            target_sets=sets,
            target_reps=max(LOW_READINESS_REP_FLOOR, exercise.target_reps - LOW_READINESS_REP_DROP),
        )
