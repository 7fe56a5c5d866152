"""Abstract base class for daily autoregulation policies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.models.exercise import PreviousPerformance, Workout

logger = logging.getLogger(__name__)


class AutoregulationPolicy(ABC):
    """Adjusts a planned workout given today's recovery state.

    Each policy encapsulates one way of turning a check-in into a session
    adjustment. Policies are discovered automatically by the
    PolicyRegistry and selected by ``policy_id``.

    Subclasses must define:
        policy_id: unique identifier (e.g. "readiness_bands")
        version: semantic version string
        checkin_type: the check-in record the policy scores
        score(): check-in -> scalar readiness/recovery score
        adjust_workout(): planned workout + score -> adjusted copy

    Policies never mutate the workout they are given.
    """

    policy_id: str
    version: str
    checkin_type: type

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    @abstractmethod
    def score(self, checkin: Any) -> float:
        """Reduce a check-in to this policy's readiness score."""
        ...

    @abstractmethod
    def adjust_workout(
        self,
        workout: Workout,
        score: float,
        previous_performance: Mapping[str, PreviousPerformance] | None = None,
    ) -> Workout:
        """Return an adjusted copy of ``workout`` for the given score."""
        ...

    def adjust(
        self,
        workout: Workout,
        checkin: Any,
        previous_performance: Mapping[str, PreviousPerformance] | None = None,
    ) -> Workout:
        """Score today's check-in and adjust the planned workout.

        Raises:
            TypeError: If the check-in is not the type this policy scores.
        """
        if not isinstance(checkin, self.checkin_type):
            raise TypeError(
                f"Policy {self.policy_id!r} expects {self.checkin_type.__name__}, "
                f"got {type(checkin).__name__}"
            )
        score = self.score(checkin)
        logger.debug("Policy %s scored check-in at %.2f", self.policy_id, score)
        return self.adjust_workout(workout, score, previous_performance)
