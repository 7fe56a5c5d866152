"""Serialization module: export mesocycles to tables and plain dicts."""

from hypertrophy_engine.serialization.tables import (
    FRAME_COLUMNS,
    mesocycle_to_dict,
    mesocycle_to_frame,
    mesocycle_to_records,
)

__all__ = [
    "FRAME_COLUMNS",
    "mesocycle_to_dict",
    "mesocycle_to_frame",
    "mesocycle_to_records",
]
