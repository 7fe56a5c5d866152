"""Mesocycle planning: split templates and the mesocycle generator."""

from hypertrophy_engine.mesocycle.generator import MesocycleGenerator
from hypertrophy_engine.mesocycle.splits import split_for_days

__all__ = ["MesocycleGenerator", "split_for_days"]
