"""Tests for the three-band readiness policy."""

import dataclasses

import pytest

from hypertrophy_engine.autoregulation.readiness_bands import (
    HIGH_READINESS_NOTE,
    LOW_READINESS_NOTE,
    PLANNED_NOTE,
    ReadinessBandsPolicy,
)
from hypertrophy_engine.models.exercise import Exercise, Workout
from hypertrophy_engine.models.readiness import FatigueCheckin, ReadinessCheckin


class TestReadinessBandsPolicy:
    def setup_method(self) -> None:
        self.policy = ReadinessBandsPolicy()

    def test_policy_metadata(self) -> None:
        assert self.policy.policy_id == "readiness_bands"
        assert self.policy.checkin_type is ReadinessCheckin

    def test_score(self, rested_checkin: ReadinessCheckin) -> None:
        assert self.policy.score(rested_checkin) == 10.0
        slow_warmup = dataclasses.replace(rested_checkin, performance_indicator=-1)
        assert self.policy.score(slow_warmup) == 9.5

    def test_slow_warmup_moves_day_into_low_band(
        self, push_workout: Workout, exhausted_checkin: ReadinessCheckin
    ) -> None:
        assert self.policy.adjust(push_workout, exhausted_checkin).adjustment_note == PLANNED_NOTE

        slow_warmup = dataclasses.replace(exhausted_checkin, performance_indicator=-1)
        adjusted = self.policy.adjust(push_workout, slow_warmup)
        assert adjusted.adjustment_note == LOW_READINESS_NOTE
        assert (adjusted.exercises[0].target_sets, adjusted.exercises[0].target_reps) == (3, 8)

    def test_low_band_trims_sets_and_reps(self, push_workout: Workout) -> None:
        adjusted = self.policy.adjust_workout(push_workout, 5.0)
        bench, ohp, raise_ = adjusted.exercises
        assert (bench.target_sets, bench.target_reps) == (3, 8)
        # three sets is already the minimum kept on a low day
        assert (ohp.target_sets, ohp.target_reps) == (3, 6)
        assert (raise_.target_sets, raise_.target_reps) == (3, 5)
        assert adjusted.adjustment_note == LOW_READINESS_NOTE

    def test_low_band_leaves_load_alone(self, push_workout: Workout) -> None:
        adjusted = self.policy.adjust_workout(push_workout, 2.0)
        assert [e.target_load for e in adjusted.exercises] == [100.0, 50.0, 10.0]

    def test_high_band_adds_rep(self, push_workout: Workout) -> None:
        adjusted = self.policy.adjust_workout(push_workout, 9.0)
        assert [e.target_reps for e in adjusted.exercises] == [11, 9, 7]
        assert [e.target_sets for e in adjusted.exercises] == [4, 3, 3]
        assert adjusted.adjustment_note == HIGH_READINESS_NOTE

    @pytest.mark.parametrize("score", [6.0, 7.0, 8.0])
    def test_middle_band_as_planned(self, push_workout: Workout, score: float) -> None:
        adjusted = self.policy.adjust_workout(push_workout, score)
        assert adjusted.exercises == push_workout.exercises
        assert adjusted.adjustment_note == PLANNED_NOTE

    @pytest.mark.parametrize("score", [3.0, 7.0, 9.5])
    def test_returns_new_objects(self, push_workout: Workout, score: float) -> None:
        adjusted = self.policy.adjust_workout(push_workout, score)
        assert adjusted is not push_workout
        for before, after in zip(push_workout.exercises, adjusted.exercises):
            assert before is not after

    def test_input_unchanged(self, push_workout: Workout) -> None:
        self.policy.adjust_workout(push_workout, 2.0)
        assert push_workout.exercises[0].target_sets == 4
        assert push_workout.exercises[0].target_reps == 10
        assert push_workout.adjustment_note == ""

    def test_idempotent(self, push_workout: Workout) -> None:
        first = self.policy.adjust_workout(push_workout, 5.0)
        second = self.policy.adjust_workout(push_workout, 5.0)
        assert first == second

    def test_adjust_scores_checkin(
        self, push_workout: Workout, exhausted_checkin: ReadinessCheckin
    ) -> None:
        # readiness 6.0 sits in the middle band
        adjusted = self.policy.adjust(push_workout, exhausted_checkin)
        assert adjusted.adjustment_note == PLANNED_NOTE

    def test_adjust_rejects_wrong_checkin(self, push_workout: Workout) -> None:
        with pytest.raises(TypeError, match="ReadinessCheckin"):
            self.policy.adjust(push_workout, FatigueCheckin(sleep=5))

    def test_empty_workout(self) -> None:
        adjusted = self.policy.adjust_workout(Workout(name="Rest"), 3.0)
        assert adjusted.exercises == ()
        assert adjusted.adjustment_note == LOW_READINESS_NOTE

    def test_single_exercise_rep_floor(self) -> None:
        workout = Workout(
            name="Arms",
            exercises=(Exercise(name="Curl", target_sets=5, target_reps=5),),
        )
        adjusted = self.policy.adjust_workout(workout, 4.0)
        assert adjusted.exercises[0].target_sets == 4
        assert adjusted.exercises[0].target_reps == 5
