"""Volume landmark calculations: MV, MEV, MAV and MRV per muscle group.

Two sources of landmarks exist:
- ``volume_landmarks`` derives them from profile metrics and frequency.
- ``table_landmarks`` looks them up from a static table by training age,
  used by split-based mesocycle planning.
"""

from __future__ import annotations

import logging

from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.math.rounding import round_half_up
from hypertrophy_engine.models.enums import (
    MAV_FRACTION_OF_RANGE,
    MRV_RECOVERY_OFFSET,
    MV_FRACTION_OF_MEV,
    TAF_MEV_EXPONENT,
    TrainingAge,
)
from hypertrophy_engine.models.landmarks import VolumeLandmarks

logger = logging.getLogger(__name__)


def frequency_factor(frequency: int, config: EngineConfig) -> float:
    """MRV multiplier for how often a muscle is trained per week.

    The table covers 1-3 sessions; every other frequency (4+ in practice)
    takes the documented default of 1.3.
    """
    return config.frequency_factor.get(frequency, config.default_frequency_factor)


def base_mev_for(
    muscle_group: str,
    config: EngineConfig,
    override: float | None = None,
) -> float:
    """Resolve the base MEV: user override, then config table, then default."""
    if override is not None:
        return override
    if muscle_group in config.base_mev:
        return config.base_mev[muscle_group]
    logger.warning(
        "No base MEV for muscle group %r; using default %s",
        muscle_group,
        config.default_base_mev,
    )
    return config.default_base_mev


def size_factor_for(muscle_group: str, config: EngineConfig) -> float:
    return config.muscle_size_factor.get(muscle_group, config.default_muscle_size_factor)


def volume_landmarks(
    muscle_group: str,
    training_age_factor: float,
    recovery_capacity_score: float,
    config: EngineConfig,
    frequency: int = 2,
    base_mev_override: float | None = None,
) -> VolumeLandmarks:
    """Compute weekly set-count landmarks for one muscle group.

    MEV = base_mev * (1 + size_factor) * TAF^0.3
    MRV = MEV * (2.5 + RCS) * frequency_factor
    MAV = MEV + (MRV - MEV) * 0.7
    MV  = MEV * 0.6

    All four are rounded half up at return. Unknown muscle groups fall
    back to base MEV 8 and size factor 0.2.

    Args:
        muscle_group: Muscle group name, e.g. "chest".
        training_age_factor: TAF from profile metrics.
        recovery_capacity_score: RCS from profile metrics.
        config: Engine tables.
        frequency: Sessions per week for this muscle.
        base_mev_override: Per-user base MEV, if the profile carries one.

    Returns:
        VolumeLandmarks with mv <= mev <= mav <= mrv.
    """
    base_mev = base_mev_for(muscle_group, config, base_mev_override)
    size_factor = size_factor_for(muscle_group, config)

    mev = base_mev * (1.0 + size_factor) * training_age_factor**TAF_MEV_EXPONENT
    mrv = mev * (MRV_RECOVERY_OFFSET + recovery_capacity_score) * frequency_factor(
        frequency, config
    )
    mav = mev + (mrv - mev) * MAV_FRACTION_OF_RANGE
    mv = mev * MV_FRACTION_OF_MEV

    logger.debug(
        "Landmarks for %s at %dx/week: mv=%.2f mev=%.2f mav=%.2f mrv=%.2f",
        muscle_group, frequency, mv, mev, mav, mrv,
    )

    return VolumeLandmarks(
        muscle_group=muscle_group,
        mv=round_half_up(mv),
        mev=round_half_up(mev),
        mav=round_half_up(mav),
        mrv=round_half_up(mrv),
    )


def table_landmarks(
    training_age: TrainingAge,
    muscle_group: str,
    config: EngineConfig,
) -> VolumeLandmarks:
    """Look up baseline landmarks by experience category.

    Categories missing from the table use the configured default
    (beginner). The table carries no MV, so MV is 60% of MEV.
    """
    table = config.training_age_landmarks
    if training_age not in table:
        logger.warning(
            "No landmark table for training age %r; using %s",
            training_age,
            config.default_training_age.value,
        )
    mev, mav, mrv = table.get(training_age, table[config.default_training_age])
    return VolumeLandmarks(
        muscle_group=muscle_group,
        mv=round_half_up(mev * MV_FRACTION_OF_MEV),
        mev=mev,
        mav=mav,
        mrv=mrv,
    )
