"""Volume landmarks for a single muscle group."""

from __future__ import annotations

from dataclasses import dataclass

from hypertrophy_engine.math.rounding import round_half_up
from hypertrophy_engine.models.enums import DELOAD_VOLUME_FRACTION


@dataclass(frozen=True)
class VolumeLandmarks:
    """Weekly set-count landmarks: MV <= MEV <= MAV <= MRV.

    Recomputed on demand from profile metrics and frequency; the engine
    never persists them.
    """

    muscle_group: str
    mv: int
    mev: int
    mav: int
    mrv: int

    def __post_init__(self) -> None:
        if self.mv < 0:
            raise ValueError(f"Landmarks must be non-negative, got mv={self.mv}")
        if not self.mv <= self.mev <= self.mav <= self.mrv:
            raise ValueError(
                f"Landmarks for {self.muscle_group!r} must satisfy "
                f"mv <= mev <= mav <= mrv, got "
                f"{self.mv}/{self.mev}/{self.mav}/{self.mrv}"
            )

    @property
    def deload_volume(self) -> int:
        """Fixed deload-week target: 60% of MEV, rounded half up."""
        return round_half_up(self.mev * DELOAD_VOLUME_FRACTION)

    def as_dict(self) -> dict[str, int]:
        return {"mv": self.mv, "mev": self.mev, "mav": self.mav, "mrv": self.mrv}
