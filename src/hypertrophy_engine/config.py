"""Engine configuration: environment settings and immutable lookup tables.

Module-level settings are read once from the environment. ``EngineConfig``
bundles the tuned tables an engine instance owns; it is frozen and its
mappings are read-only proxies, so one config can be shared across users.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from hypertrophy_engine.exceptions import ConfigurationError
from hypertrophy_engine.models.enums import (
    BASE_MEV,
    DEFAULT_BASE_MEV,
    DEFAULT_FREQUENCY_FACTOR,
    DEFAULT_MESOCYCLE_WEEKS,
    DEFAULT_MUSCLE_SIZE_FACTOR,
    DEFAULT_SPLIT_MESOCYCLE_WEEKS,
    DEFAULT_TRAINING_AGE,
    DEFAULT_TRAINING_FREQUENCY,
    FATIGUE_MASKS,
    FREQUENCY_FACTOR,
    MUSCLE_SIZE_FACTOR,
    TRAINING_AGE_LANDMARKS,
    TrainingAge,
)

AUTOREGULATION_POLICY: str = os.environ.get(
    "HYPERTROPHY_AUTOREGULATION_POLICY", "readiness_bands"
)
MESOCYCLE_WEEKS: int = int(
    os.environ.get("HYPERTROPHY_MESOCYCLE_WEEKS", str(DEFAULT_MESOCYCLE_WEEKS))
)
SPLIT_MESOCYCLE_WEEKS: int = int(
    os.environ.get(
        "HYPERTROPHY_SPLIT_MESOCYCLE_WEEKS", str(DEFAULT_SPLIT_MESOCYCLE_WEEKS)
    )
)
TRAINING_FREQUENCY: int = int(
    os.environ.get("HYPERTROPHY_DEFAULT_FREQUENCY", str(DEFAULT_TRAINING_FREQUENCY))
)


@dataclass(frozen=True)
class FatigueMask:
    """Weight and flag threshold for one fatigue-mask input."""

    weight: float
    threshold: float


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class EngineConfig:
    """Read-only tables owned by a PeriodizationEngine instance."""

    base_mev: Mapping[str, float] = field(default_factory=lambda: _freeze(BASE_MEV))
    muscle_size_factor: Mapping[str, float] = field(
        default_factory=lambda: _freeze(MUSCLE_SIZE_FACTOR)
    )
    frequency_factor: Mapping[int, float] = field(
        default_factory=lambda: _freeze(FREQUENCY_FACTOR)
    )
    fatigue_masks: Mapping[str, FatigueMask] = field(
        default_factory=lambda: _freeze(
            {name: FatigueMask(w, t) for name, (w, t) in FATIGUE_MASKS.items()}
        )
    )
    training_age_landmarks: Mapping[TrainingAge, tuple[int, int, int]] = field(
        default_factory=lambda: _freeze(TRAINING_AGE_LANDMARKS)
    )
    default_base_mev: float = DEFAULT_BASE_MEV
    default_muscle_size_factor: float = DEFAULT_MUSCLE_SIZE_FACTOR
    default_frequency_factor: float = DEFAULT_FREQUENCY_FACTOR
    default_training_age: TrainingAge = DEFAULT_TRAINING_AGE
    autoregulation_policy: str = AUTOREGULATION_POLICY
    mesocycle_weeks: int = MESOCYCLE_WEEKS
    split_mesocycle_weeks: int = SPLIT_MESOCYCLE_WEEKS
    training_frequency: int = TRAINING_FREQUENCY

    def __post_init__(self) -> None:
        # Callers may pass plain dicts; store read-only copies
        for name in (
            "base_mev",
            "muscle_size_factor",
            "frequency_factor",
            "fatigue_masks",
            "training_age_landmarks",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _freeze(value))
        self._validate()

    def _validate(self) -> None:
        for group, mev in self.base_mev.items():
            if mev < 0:
                raise ConfigurationError(f"Base MEV for {group!r} is negative: {mev}")
        for group, factor in self.muscle_size_factor.items():
            if factor < 0:
                raise ConfigurationError(
                    f"Muscle size factor for {group!r} is negative: {factor}"
                )
        for frequency, factor in self.frequency_factor.items():
            if factor <= 0:
                raise ConfigurationError(
                    f"Frequency factor for {frequency}x/week must be positive: {factor}"
                )
        for name, mask in self.fatigue_masks.items():
            if mask.weight < 0:
                raise ConfigurationError(f"Fatigue mask {name!r} has negative weight")
        for age, (mev, mav, mrv) in self.training_age_landmarks.items():
            if not 0 <= mev <= mav <= mrv:
                raise ConfigurationError(
                    f"Landmark table for {age} must satisfy 0 <= mev <= mav <= mrv"
                )
        if self.default_training_age not in self.training_age_landmarks:
            raise ConfigurationError(
                f"Default training age {self.default_training_age} has no landmarks"
            )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build the default tables with the environment's settings applied."""
        return cls(
            autoregulation_policy=AUTOREGULATION_POLICY,
            mesocycle_weeks=MESOCYCLE_WEEKS,
            split_mesocycle_weeks=SPLIT_MESOCYCLE_WEEKS,
            training_frequency=TRAINING_FREQUENCY,
        )

    def with_base_mev(self, base_mev: Mapping[str, float]) -> EngineConfig:
        """Return a copy using a different base MEV table."""
        return replace(self, base_mev=_freeze(base_mev))
