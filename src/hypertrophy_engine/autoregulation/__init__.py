"""Daily autoregulation policies.

Two policies are kept side by side rather than merged; the orchestrator
chooses one per session by id.
"""

from hypertrophy_engine.autoregulation.base import AutoregulationPolicy
from hypertrophy_engine.autoregulation.fatigue_mask import FatigueMaskPolicy
from hypertrophy_engine.autoregulation.readiness_bands import ReadinessBandsPolicy

__all__ = [
    "AutoregulationPolicy",
    "FatigueMaskPolicy",
    "ReadinessBandsPolicy",
]
