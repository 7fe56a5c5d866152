"""Intensity prescription and session-to-session load progression.

The effort targets scale with how close current volume sits to the
recoverable ceiling: near MRV volume is capped, so effort rises; far
below it, harder sets are permitted at the low end.
"""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from hypertrophy_engine.models.enums import (
    BASE_RIR,
    BASE_RPE,
    DEFAULT_TARGET_RIR,
    HIGH_VOLUME_RATIO,
    LOAD_INCREMENT,
    LOAD_STEP_FRACTION,
    LOW_VOLUME_RATIO,
    REP_CEILING,
    REP_FLOOR_AFTER_RESET,
    REP_RESET_DROP,
    RIR_TOLERANCE,
    RIR_VOLUME_ADJUSTMENT,
    RPE_TOLERANCE,
    RPE_VOLUME_ADJUSTMENT,
    SMALL_LOAD_INCREMENT,
    STALL_LIMIT,
    ExerciseType,
    ProgressionAction,
)
from hypertrophy_engine.models.exercise import CompletedSet, Exercise, Progression


def _volume_ratio(current_volume: float, mrv: float) -> float:
    return current_volume / mrv


def target_rpe(exercise_type: ExerciseType, current_volume: float, mrv: float) -> float:
    """Target RPE for an exercise class at the current weekly volume.

    Base 8.0 compound / 8.5 isolation; +0.5 above 80% of MRV, -0.5 below
    40% of MRV. A zero MRV (no recoverable volume) keeps the base value.
    """
    rpe = BASE_RPE[exercise_type]
    if mrv <= 0:
        return rpe
    ratio = _volume_ratio(current_volume, mrv)
    if ratio > HIGH_VOLUME_RATIO:
        rpe += RPE_VOLUME_ADJUSTMENT
    elif ratio < LOW_VOLUME_RATIO:
        rpe -= RPE_VOLUME_ADJUSTMENT
    return rpe


def target_rir(exercise_type: ExerciseType, current_volume: float, mrv: float) -> int:
    """Target RIR counterpart of :func:`target_rpe`.

    Base 2 compound / 1 isolation; one rep closer to failure above 80% of
    MRV, one further below 40%. A zero MRV keeps the base value.
    """
    rir = BASE_RIR[exercise_type]
    if mrv <= 0:
        return rir
    ratio = _volume_ratio(current_volume, mrv)
    if ratio > HIGH_VOLUME_RATIO:
        rir -= RIR_VOLUME_ADJUSTMENT
    elif ratio < LOW_VOLUME_RATIO:
        rir += RIR_VOLUME_ADJUSTMENT
    return rir


def load_progression(previous_load: float, last_session_rpe: float, target: float) -> float:
    """Suggest next load from last session's RPE.

    More than 0.5 RPE under target: +2.5%. More than 0.5 over: -2.5%.
    Otherwise hold. Bounded to one 2.5% step per cycle.
    """
    if last_session_rpe < target - RPE_TOLERANCE:
        return previous_load * (1.0 + LOAD_STEP_FRACTION)
    if last_session_rpe > target + RPE_TOLERANCE:
        return previous_load * (1.0 - LOAD_STEP_FRACTION)
    return previous_load


def load_progression_from_rir(previous_load: float, last_session_rir: float, target: float) -> float:
    """RIR form of :func:`load_progression` with a one-rep tolerance."""
    if last_session_rir > target + RIR_TOLERANCE:
        return previous_load * (1.0 + LOAD_STEP_FRACTION)
    if last_session_rir < target - RIR_TOLERANCE:
        return previous_load * (1.0 - LOAD_STEP_FRACTION)
    return previous_load


def mean_rir(completed_sets: tuple[CompletedSet, ...] | list[CompletedSet]) -> float | None:
    """Average reps in reserve over sets that logged an effort signal."""
    values = [s.effective_rir for s in completed_sets if s.effective_rir is not None]
    if not values:
        return None
    return float(np.mean(values))


def progress_exercise(
    exercise: Exercise,
    completed_sets: tuple[CompletedSet, ...] | list[CompletedSet],
) -> Progression:
    """Double progression: reps first, then load.

    Compares mean RIR with the exercise's target RIR (default 3):
        difference > 1   too easy: +5 load
        difference < -1  too hard: hold, or -5 once stalled twice
        otherwise        on target: +1 rep below 10 reps, else +2.5 load
                         and reps reset to max(6, reps - 2)

    The returned stall count resets on any progression and increments on
    a hold or regression.

    Args:
        exercise: The exercise as prescribed for the completed session.
        completed_sets: Sets logged in that session.

    Returns:
        A Progression with next-session weight, reps and sets.
    """
    current = Progression(
        weight=exercise.target_load,
        reps=exercise.target_reps,
        sets=exercise.target_sets,
        note="No effort data logged - keeping current targets",
        action=ProgressionAction.NO_DATA,
        stall_count=exercise.stall_count,
    )

    avg_rir = mean_rir(completed_sets)
    if avg_rir is None:
        return current

    goal_rir = exercise.target_rir if exercise.target_rir is not None else DEFAULT_TARGET_RIR
    difference = avg_rir - goal_rir

    if difference > RIR_TOLERANCE:
        return replace(
            current,
            weight=exercise.target_load + LOAD_INCREMENT,
            note="Increasing weight - last session was too easy",
            action=ProgressionAction.INCREASE_LOAD,
            stall_count=0,
        )

    if difference < -RIR_TOLERANCE:
        if exercise.stall_count >= STALL_LIMIT:
            return replace(
                current,
                weight=exercise.target_load - LOAD_INCREMENT,
                note="Regression: reducing weight due to repeated struggles",
                action=ProgressionAction.REGRESS,
                stall_count=exercise.stall_count + 1,
            )
        return replace(
            current,
            note="Maintaining weight - focus on form and recovery",
            action=ProgressionAction.HOLD,
            stall_count=exercise.stall_count + 1,
        )

    if exercise.target_reps < REP_CEILING:
        return replace(
            current,
            reps=exercise.target_reps + 1,
            note="Adding 1 rep - strength progressing well",
            action=ProgressionAction.ADD_REP,
            stall_count=0,
        )

    return replace(
        current,
        weight=exercise.target_load + SMALL_LOAD_INCREMENT,
        reps=max(REP_FLOOR_AFTER_RESET, exercise.target_reps - REP_RESET_DROP),
        note="Increasing weight and resetting reps",
        action=ProgressionAction.INCREASE_LOAD_RESET_REPS,
        stall_count=0,
    )
