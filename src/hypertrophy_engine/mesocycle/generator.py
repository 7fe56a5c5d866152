"""Mesocycle generation: composes landmarks, progression and intensity.

Two orchestration modes:
- ``generate`` plans a list of muscle groups for ``length`` training
  weeks and appends a deload week (week ``length + 1``).
- ``generate_split`` lays the profile's weekly split over ``length``
  weeks whose last week is the deload, ramping target RIR down across
  the training weeks.

The deload week is never computed from the progression formula: it is a
fixed low-stress week at 60% of MEV with RPE 7.0 / 7.5.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.math.intensity import target_rpe
from hypertrophy_engine.math.landmarks import table_landmarks, volume_landmarks
from hypertrophy_engine.math.profile_metrics import (
    recovery_capacity_score,
    training_age_factor,
)
from hypertrophy_engine.math.progression import weekly_target_rir, weekly_volume
from hypertrophy_engine.mesocycle.splits import split_for_days, tracked_muscle_groups
from hypertrophy_engine.models.enums import (
    DELOAD_RPE_COMPOUND,
    DELOAD_RPE_ISOLATION,
    MESOCYCLE_STARTING_VOLUME_FACTOR,
    MIN_SPLIT_MESOCYCLE_WEEKS,
    ExerciseType,
)
from hypertrophy_engine.models.landmarks import VolumeLandmarks
from hypertrophy_engine.models.mesocycle import (
    Mesocycle,
    MuscleTarget,
    SplitTemplate,
    TrainingDay,
    WeeklyPlan,
)
from hypertrophy_engine.models.profile import UserProfile

logger = logging.getLogger(__name__)


class MesocycleGenerator:
    """Builds immutable Mesocycle plans for one user profile.

    Usage:
        generator = MesocycleGenerator(profile)
        mesocycle = generator.generate(["chest", "back", "legs"])
        split_mesocycle = generator.generate_split()
    """

    def __init__(self, profile: UserProfile, config: EngineConfig | None = None) -> None:
        self.profile = profile
        self.config = config or EngineConfig()
        self._taf = training_age_factor(profile)
        self._rcs = recovery_capacity_score(profile)

    def landmarks_for(self, muscle_group: str, frequency: int) -> VolumeLandmarks:
        return volume_landmarks(
            muscle_group,
            training_age_factor=self._taf,
            recovery_capacity_score=self._rcs,
            config=self.config,
            frequency=frequency,
            base_mev_override=self.profile.base_mev_override(muscle_group),
        )

    # ------------------------------------------------------------------
    # Mode 1: muscle-group list + appended deload week
    # ------------------------------------------------------------------

    def generate(
        self,
        muscle_groups: Iterable[str],
        length: int = 5,
        frequency: int = 2,
        frequencies: Mapping[str, int] | None = None,
    ) -> Mesocycle:
        """Plan ``length`` progressive weeks followed by a deload week.

        Args:
            muscle_groups: Muscle groups to track.
            length: Number of progressive weeks before the deload.
            frequency: Sessions per week per muscle, for MRV.
            frequencies: Per-muscle sessions per week; groups missing
                from it use ``frequency``.

        Returns:
            A Mesocycle of ``length + 1`` weeks.

        Raises:
            ValueError: If length < 1.
        """
        if length < 1:
            raise ValueError(f"Mesocycle must have at least 1 training week, got {length}")

        groups = tuple(dict.fromkeys(muscle_groups))
        per_muscle = frequencies or {}
        landmarks = {
            g: self.landmarks_for(g, per_muscle.get(g, frequency)) for g in groups
        }

        weeks = [
            WeeklyPlan(
                week_number=week,
                muscle_targets=tuple(
                    self._progressive_target(landmarks[g], week) for g in groups
                ),
            )
            for week in range(1, length + 1)
        ]
        weeks.append(
            WeeklyPlan(
                week_number=length + 1,
                muscle_targets=tuple(self._deload_target(landmarks[g]) for g in groups),
                is_deload=True,
            )
        )

        logger.info(
            "Generated %d-week mesocycle for %s (TAF %.2f, RCS %.2f)",
            len(weeks), ", ".join(groups), self._taf, self._rcs,
        )
        return Mesocycle(weeks=tuple(weeks))

    # ------------------------------------------------------------------
    # Mode 2: weekly split + RIR ramp, last week is the deload
    # ------------------------------------------------------------------

    def generate_split(self, length: int = 4) -> Mesocycle:
        """Plan the profile's weekly split over ``length`` weeks.

        Landmarks come from the training-age table. The last week is the
        deload at RIR 4; earlier weeks ramp RIR from 3 towards 0.

        Raises:
            ValueError: If length < 2.
        """
        if length < MIN_SPLIT_MESOCYCLE_WEEKS:
            raise ValueError(
                f"Split mesocycle must be at least {MIN_SPLIT_MESOCYCLE_WEEKS} weeks, "
                f"got {length}"
            )

        split = split_for_days(self.profile.days_per_week)
        groups = tracked_muscle_groups(split)
        landmarks = {
            g: table_landmarks(self.profile.training_age, g, self.config) for g in groups
        }

        weeks = []
        for week in range(1, length + 1):
            is_deload = week == length
            if is_deload:
                targets = tuple(self._deload_target(landmarks[g]) for g in groups)
            else:
                targets = tuple(self._progressive_target(landmarks[g], week) for g in groups)
            rir = weekly_target_rir(week, length)
            weeks.append(
                WeeklyPlan(
                    week_number=week,
                    muscle_targets=targets,
                    is_deload=is_deload,
                    target_rir=rir,
                    days=self._split_days(split, rir, is_deload),
                )
            )

        logger.info(
            "Generated %d-week %s split mesocycle (%s, %d days/week)",
            length, split.split_type.value, self.profile.training_age.value,
            split.days_per_week,
        )
        return Mesocycle(weeks=tuple(weeks), split=split)

    # ------------------------------------------------------------------
    # Week builders
    # ------------------------------------------------------------------

    def _progressive_target(self, landmarks: VolumeLandmarks, week: int) -> MuscleTarget:
        starting_volume = landmarks.mev * MESOCYCLE_STARTING_VOLUME_FACTOR
        planned = weekly_volume(starting_volume, week, landmarks.mav, self._taf)
        return MuscleTarget(
            muscle_group=landmarks.muscle_group,
            target_volume=planned.target_volume,
            target_rpe_compound=target_rpe(
                ExerciseType.COMPOUND, planned.target_volume, landmarks.mrv
            ),
            target_rpe_isolation=target_rpe(
                ExerciseType.ISOLATION, planned.target_volume, landmarks.mrv
            ),
            landmarks=landmarks,
            deload_triggered=planned.deload_triggered,
        )

    @staticmethod
    def _deload_target(landmarks: VolumeLandmarks) -> MuscleTarget:
        return MuscleTarget(
            muscle_group=landmarks.muscle_group,
            target_volume=landmarks.deload_volume,
            target_rpe_compound=DELOAD_RPE_COMPOUND,
            target_rpe_isolation=DELOAD_RPE_ISOLATION,
            landmarks=landmarks,
        )

    @staticmethod
    def _split_days(
        split: SplitTemplate, target_rir: int, is_deload: bool
    ) -> tuple[TrainingDay, ...]:
        return tuple(
            TrainingDay(
                name=name,
                muscle_groups=groups,
                target_rir=target_rir,
                is_deload=is_deload,
            )
            for name, groups in zip(split.day_names, split.day_muscle_groups)
        )
