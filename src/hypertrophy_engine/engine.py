"""PeriodizationEngine: the facade that binds every operation to one profile."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from hypertrophy_engine.autoregulation.base import AutoregulationPolicy
from hypertrophy_engine.autoregulation.readiness_bands import ReadinessBandsPolicy
from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.math import intensity, profile_metrics, progression
from hypertrophy_engine.math import readiness as readiness_math
from hypertrophy_engine.mesocycle.generator import MesocycleGenerator
from hypertrophy_engine.mesocycle.splits import muscle_frequencies, split_for_days
from hypertrophy_engine.models.enums import ExerciseType
from hypertrophy_engine.models.exercise import (
    CompletedSet,
    Exercise,
    PreviousPerformance,
    Progression,
    Workout,
)
from hypertrophy_engine.models.landmarks import VolumeLandmarks
from hypertrophy_engine.models.mesocycle import Mesocycle, WeeklyVolume
from hypertrophy_engine.models.profile import UserProfile
from hypertrophy_engine.models.readiness import ReadinessCheckin
from hypertrophy_engine.registry import PolicyRegistry

logger = logging.getLogger(__name__)


class PeriodizationEngine:
    """Computes landmarks, weekly targets, mesocycles and daily adjustments.

    Every operation is a deterministic function of the constructed
    profile, the read-only configuration and the call's arguments; the
    engine keeps no state between calls.

    Usage:
        engine = PeriodizationEngine(profile)
        mesocycle = engine.generate_mesocycle(["chest", "back", "legs"])
        adjusted = engine.autoregulate(workout, checkin)
    """

    def __init__(
        self,
        profile: UserProfile,
        config: EngineConfig | None = None,
        registry: PolicyRegistry | None = None,
    ) -> None:
        self.profile = profile
        self.config = config or EngineConfig.from_env()
        self.registry = registry or PolicyRegistry(self.config)

        # Auto-discover policies if using default registry
        if registry is None:
            self.registry.discover_policies()

        self._generator = MesocycleGenerator(profile, self.config)

    # ------------------------------------------------------------------
    # Profile metrics
    # ------------------------------------------------------------------

    def training_age_factor(self) -> float:
        return profile_metrics.training_age_factor(self.profile)

    def recovery_capacity_score(self) -> float:
        return profile_metrics.recovery_capacity_score(self.profile)

    # ------------------------------------------------------------------
    # Volume
    # ------------------------------------------------------------------

    def volume_landmarks(
        self, muscle_group: str, training_frequency: int | None = None
    ) -> VolumeLandmarks:
        """Landmarks for one muscle group at a weekly training frequency."""
        if training_frequency is None:
            training_frequency = self.config.training_frequency
        return self._generator.landmarks_for(muscle_group, training_frequency)

    def weekly_volume(
        self, starting_volume: float, week_number: int, max_volume: float
    ) -> WeeklyVolume:
        return progression.weekly_volume(
            starting_volume, week_number, max_volume, self.training_age_factor()
        )

    def adapt_base_mev(self) -> dict[str, int]:
        """Next mesocycle's base MEV table after long-term adaptation.

        Starts from the profile's overrides layered on the configured
        table. Feed the result to ``EngineConfig.with_base_mev`` to plan
        the next block.
        """
        base = dict(self.config.base_mev)
        base.update(dict(self.profile.base_mev_overrides))
        return progression.adapt_base_mev(base, self.training_age_factor())

    # ------------------------------------------------------------------
    # Intensity
    # ------------------------------------------------------------------

    def target_rpe(
        self, exercise_type: ExerciseType, current_volume: float, mrv: float
    ) -> float:
        return intensity.target_rpe(exercise_type, current_volume, mrv)

    def target_rir(
        self, exercise_type: ExerciseType, current_volume: float, mrv: float
    ) -> int:
        return intensity.target_rir(exercise_type, current_volume, mrv)

    def load_progression(
        self, previous_load: float, last_session_rpe: float, target_rpe: float
    ) -> float:
        return intensity.load_progression(previous_load, last_session_rpe, target_rpe)

    def progress_exercise(
        self,
        exercise: Exercise,
        completed_sets: Iterable[CompletedSet] | None = None,
    ) -> Progression:
        """Next-session targets; defaults to the exercise's own logged sets."""
        sets = tuple(completed_sets) if completed_sets is not None else exercise.completed_sets
        result = intensity.progress_exercise(exercise, sets)
        logger.debug("%s: %s (%s)", exercise.name, result.action.name, result.note)
        return result

    # ------------------------------------------------------------------
    # Daily readiness
    # ------------------------------------------------------------------

    def recovery_score(self, checkin: ReadinessCheckin) -> float:
        return readiness_math.recovery_score(checkin)

    def daily_readiness(self, recovery_score: float, performance_indicator: int = 0) -> float:
        return readiness_math.daily_readiness(recovery_score, performance_indicator)

    def adjust_workout(self, planned_workout: Workout, readiness_score: float) -> Workout:
        """Three-band readiness adjustment of a planned workout."""
        return self.policy(ReadinessBandsPolicy.policy_id).adjust_workout(
            planned_workout, readiness_score
        )

    def policy(self, policy_id: str | None = None) -> AutoregulationPolicy:
        """Look up an autoregulation policy; defaults to the configured one."""
        return self.registry.get(policy_id or self.config.autoregulation_policy)

    def autoregulate(
        self,
        planned_workout: Workout,
        checkin: Any,
        previous_performance: Mapping[str, PreviousPerformance] | None = None,
        policy_id: str | None = None,
    ) -> Workout:
        """Adjust a planned workout from today's check-in with one policy.

        Raises:
            UnknownPolicyError: If ``policy_id`` is not registered.
            TypeError: If the check-in does not match the policy.
        """
        chosen = self.policy(policy_id)
        adjusted = chosen.adjust(planned_workout, checkin, previous_performance)
        logger.info("Autoregulated %r with %s: %s",
                    planned_workout.name, chosen.policy_id, adjusted.adjustment_note)
        return adjusted

    # ------------------------------------------------------------------
    # Mesocycles
    # ------------------------------------------------------------------

    def generate_mesocycle(
        self,
        muscle_groups: Iterable[str] | None = None,
        length: int | None = None,
        training_frequency: int | None = None,
    ) -> Mesocycle:
        """Progressive weeks per muscle group plus an appended deload week.

        Without muscle groups, the groups trained by the profile's split
        are planned, each at the number of split days that train it. An
        explicit ``training_frequency`` applies to every group.
        """
        frequencies: dict[str, int] = {}
        if muscle_groups is None:
            frequencies = muscle_frequencies(split_for_days(self.profile.days_per_week))
            muscle_groups = list(frequencies)
        if training_frequency is not None:
            frequencies = {}
        else:
            training_frequency = self.config.training_frequency
        return self._generator.generate(
            muscle_groups,
            length=self.config.mesocycle_weeks if length is None else length,
            frequency=training_frequency,
            frequencies=frequencies,
        )

    def generate_split_mesocycle(self, length: int | None = None) -> Mesocycle:
        """Split-template mesocycle whose last week is the deload."""
        return self._generator.generate_split(
            length=self.config.split_mesocycle_weeks if length is None else length
        )
