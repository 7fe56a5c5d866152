"""Tests for daily readiness scoring and the fatigue-mask tiers."""

import pytest

from hypertrophy_engine.config import EngineConfig, FatigueMask
from hypertrophy_engine.math.readiness import (
    adjustment_factor,
    below_threshold,
    daily_readiness,
    fatigue_mask_score,
    performance_modifier,
    recovery_score,
)
from hypertrophy_engine.models.exercise import CompletedSet, PreviousPerformance
from hypertrophy_engine.models.readiness import FatigueCheckin, ReadinessCheckin


class TestRecoveryScore:
    def test_perfect_day(self, rested_checkin: ReadinessCheckin) -> None:
        assert recovery_score(rested_checkin) == 10.0

    def test_soreness_inverted(self) -> None:
        fresh = ReadinessCheckin(5, 5, 5, muscle_soreness=1)
        sore = ReadinessCheckin(5, 5, 5, muscle_soreness=10)
        assert recovery_score(fresh) == pytest.approx(6.25)
        assert recovery_score(sore) == pytest.approx(4.0)

    def test_exhausted_day(self, exhausted_checkin: ReadinessCheckin) -> None:
        assert recovery_score(exhausted_checkin) == 2.0


class TestDailyReadiness:
    def test_perfect_recovery(self) -> None:
        assert daily_readiness(10) == 10.0

    def test_blends_with_neutral_indicator(self) -> None:
        assert daily_readiness(4) == 7.0

    def test_performance_indicator_shifts_score(self) -> None:
        assert daily_readiness(4, performance_indicator=-1) == 6.5
        assert daily_readiness(4, performance_indicator=1) == 7.5


class TestFatigueMaskScore:
    def setup_method(self) -> None:
        self.masks = EngineConfig().fatigue_masks

    def test_no_inputs_defaults_to_seven(self) -> None:
        assert fatigue_mask_score(FatigueCheckin(), self.masks) == 7.0

    def test_single_input_is_its_own_score(self) -> None:
        assert fatigue_mask_score(FatigueCheckin(sleep=4), self.masks) == pytest.approx(4.0)

    def test_weights_renormalised_over_present_inputs(self) -> None:
        score = fatigue_mask_score(FatigueCheckin(sleep=10, stress=0), self.masks)
        assert score == pytest.approx(3.0 / 0.55)

    def test_all_inputs(self, fatigue_checkin: FatigueCheckin) -> None:
        expected = 5 * 0.3 + 8 * 0.25 + 7 * 0.2 + 8 * 0.15 + 7 * 0.1
        assert fatigue_mask_score(fatigue_checkin, self.masks) == pytest.approx(expected)

    def test_values_clamped(self) -> None:
        assert fatigue_mask_score(FatigueCheckin(sleep=15), self.masks) == pytest.approx(10.0)
        assert fatigue_mask_score(FatigueCheckin(stress=-3), self.masks) == 0.0

    def test_zero_weights_default(self) -> None:
        masks = {"sleep": FatigueMask(weight=0.0, threshold=6)}
        assert fatigue_mask_score(FatigueCheckin(sleep=2), masks) == 7.0

    def test_below_threshold(self, fatigue_checkin: FatigueCheckin) -> None:
        assert below_threshold(fatigue_checkin, self.masks) == ["sleep"]

    def test_nothing_flagged_when_absent(self) -> None:
        assert below_threshold(FatigueCheckin(), self.masks) == []


class TestAdjustmentFactor:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (9.0, (1.10, 1.05, -1)),
            (8.0, (1.10, 1.05, -1)),
            (7.0, (1.00, 1.00, 0)),
            (6.0, (1.00, 1.00, 0)),
            (5.0, (0.85, 0.95, 1)),
            (4.0, (0.85, 0.95, 1)),
            (3.9, (0.70, 0.90, 2)),
            (0.0, (0.70, 0.90, 2)),
        ],
    )
    def test_tiers(self, score: float, expected: tuple[float, float, int]) -> None:
        factor = adjustment_factor(score)
        assert (factor.volume, factor.intensity, factor.rir_adjustment) == expected


class TestPerformanceModifier:
    def test_easier_than_target(self) -> None:
        previous = PreviousPerformance(
            sets=(CompletedSet(reps=8, weight=100, rir=4),), target_rir=2
        )
        assert performance_modifier(previous) == pytest.approx(1.025)

    def test_harder_than_target(self) -> None:
        previous = PreviousPerformance(
            sets=(CompletedSet(reps=8, weight=100, rpe=10),), target_rir=2
        )
        assert performance_modifier(previous) == pytest.approx(0.975)

    def test_on_target(self) -> None:
        previous = PreviousPerformance(sets=(CompletedSet(reps=8, weight=100, rir=3),))
        assert performance_modifier(previous) == 1.0

    def test_no_effort_data(self) -> None:
        previous = PreviousPerformance(sets=(CompletedSet(reps=8, weight=100),), target_rir=2)
        assert performance_modifier(previous) == 1.0

    def test_unrated_sets_ignored(self) -> None:
        previous = PreviousPerformance(
            sets=(
                CompletedSet(reps=8, weight=100, rir=4),
                CompletedSet(reps=8, weight=100),
                CompletedSet(reps=8, weight=100, rpe=6),
            ),
            target_rir=2,
        )
        # unrated set skipped; rir 4 and rpe 6 both read as 4 in reserve
        assert performance_modifier(previous) == pytest.approx(1.025)
