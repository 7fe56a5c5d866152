"""Adaptive periodization engine for resistance training."""

from hypertrophy_engine.config import EngineConfig
from hypertrophy_engine.engine import PeriodizationEngine
from hypertrophy_engine.exceptions import (
    ConfigurationError,
    HypertrophyEngineError,
    UnknownPolicyError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EngineConfig",
    "HypertrophyEngineError",
    "PeriodizationEngine",
    "UnknownPolicyError",
]
