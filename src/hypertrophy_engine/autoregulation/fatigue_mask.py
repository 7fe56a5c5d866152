"""Fatigue-mask policy: weighted five-factor recovery score, four-tier scaling.

Scales target sets, load and RIR for every exercise by the tier the
weighted score falls into. Load is only rescaled when the workout store
supplied the exercise's previous performance.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Mapping

from hypertrophy_engine.autoregulation.base import AutoregulationPolicy
from hypertrophy_engine.math.readiness import (
    adjustment_factor,
    below_threshold,
    fatigue_mask_score,
    performance_modifier,
)
from hypertrophy_engine.math.rounding import round_half_up
from hypertrophy_engine.models.enums import (
    DEFAULT_TARGET_RIR,
    MIN_ADJUSTED_RIR,
    MIN_ADJUSTED_SETS,
)
from hypertrophy_engine.models.exercise import Exercise, PreviousPerformance, Workout
from hypertrophy_engine.models.readiness import AdjustmentFactor, FatigueCheckin

logger = logging.getLogger(__name__)


def adjustment_note(factor: AdjustmentFactor) -> str:
    if factor.volume > 1:
        return "Recovery is excellent - pushing volume and intensity!"
    if factor.volume < 0.9:
        return "Recovery is low - reducing training stress for today."
    return "Recovery is moderate - maintaining planned training."


def adjust_load(
    current_load: float,
    intensity: float,
    previous: PreviousPerformance | None,
) -> float:
    """Rescale a load by the tier intensity and last session's effort.

    Without a previous-performance record the current load is returned
    unchanged.
    """
    if previous is None:
        return current_load
    return round_half_up(current_load * intensity * performance_modifier(previous))


class FatigueMaskPolicy(AutoregulationPolicy):
    """Scales sets, load and RIR from a weighted fatigue-mask score."""

    policy_id = "fatigue_mask"
    version = "1.0.0"
    checkin_type = FatigueCheckin

    def score(self, checkin: FatigueCheckin) -> float:
        return fatigue_mask_score(checkin, self.config.fatigue_masks)

    def adjust_workout(
        self,
        workout: Workout,
        score: float,
        previous_performance: Mapping[str, PreviousPerformance] | None = None,
    ) -> Workout:
        factor = adjustment_factor(score)
        note = adjustment_note(factor)
        history = previous_performance or {}

        exercises = tuple(
            self._adjust_exercise(e, factor, note, history.get(e.name))
            for e in workout.exercises
        )
        logger.debug(
            "Fatigue score %.2f -> volume x%.2f, intensity x%.2f, RIR %+d",
            score, factor.volume, factor.intensity, factor.rir_adjustment,
        )
        return dataclasses.replace(workout, exercises=exercises, adjustment_note=note)

    def adjust(
        self,
        workout: Workout,
        checkin: FatigueCheckin,
        previous_performance: Mapping[str, PreviousPerformance] | None = None,
    ) -> Workout:
        adjusted = super().adjust(workout, checkin, previous_performance)
        flagged = below_threshold(checkin, self.config.fatigue_masks)
        if not flagged:
            return adjusted
        return dataclasses.replace(
            adjusted,
            adjustment_note=(
                f"{adjusted.adjustment_note} Below threshold: {', '.join(flagged)}."
            ),
        )

    @staticmethod
    def _adjust_exercise(
        exercise: Exercise,
        factor: AdjustmentFactor,
        note: str,
        previous: PreviousPerformance | None,
    ) -> Exercise:
        rir = exercise.target_rir if exercise.target_rir is not None else DEFAULT_TARGET_RIR
        return dataclasses.replace(
            exercise,
            target_sets=max(
                MIN_ADJUSTED_SETS, round_half_up(exercise.target_sets * factor.volume)
            ),
            target_load=adjust_load(exercise.target_load, factor.intensity, previous),
            target_rir=max(MIN_ADJUSTED_RIR, rir + factor.rir_adjustment),
            notes=note,
        )
