"""Daily readiness inputs and the adjustment factors derived from them."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ReadinessCheckin:
    """Daily subjective check-in, each field on a 1-10 scale.

    Lower soreness is better; the other three are higher-is-better.
    ``performance_indicator`` is the warm-up signal (-1, 0 or +1); leave
    it at 0 when no warm-up sets were rated.
    """

    sleep_quality: float
    energy_level: float
    motivation: float
    muscle_soreness: float
    performance_indicator: int = 0


@dataclass(frozen=True)
class FatigueCheckin:
    """Five-factor check-in for the fatigue-mask policy.

    Any field may be omitted; omitted fields contribute no weight.
    """

    sleep: float | None = None
    stress: float | None = None
    soreness: float | None = None
    motivation: float | None = None
    lifestyle: float | None = None

    def present(self) -> dict[str, float]:
        """Return the inputs that were actually supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class AdjustmentFactor:
    """Multipliers applied to a planned session for one recovery tier."""

    volume: float
    intensity: float
    rir_adjustment: int
