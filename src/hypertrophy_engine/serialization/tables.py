"""Tabular and dict exports of a Mesocycle.

The workout store persists the nested dict form; analytics consumers
take the flat pandas table with one row per (week, muscle group).

All functions are pure (no I/O).
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from hypertrophy_engine.models.mesocycle import Mesocycle, MuscleTarget, WeeklyPlan

FRAME_COLUMNS = [
    "week",
    "muscle_group",
    "target_volume",
    "target_rpe_compound",
    "target_rpe_isolation",
    "target_rir",
    "is_deload",
    "deload_triggered",
    "mev",
    "mav",
    "mrv",
]


def _target_record(week: WeeklyPlan, target: MuscleTarget) -> dict[str, Any]:
    return {
        "week": week.week_number,
        "muscle_group": target.muscle_group,
        "target_volume": target.target_volume,
        "target_rpe_compound": target.target_rpe_compound,
        "target_rpe_isolation": target.target_rpe_isolation,
        "target_rir": week.target_rir,
        "is_deload": week.is_deload,
        "deload_triggered": target.deload_triggered,
        "mev": target.landmarks.mev,
        "mav": target.landmarks.mav,
        "mrv": target.landmarks.mrv,
    }


def mesocycle_to_records(mesocycle: Mesocycle) -> list[dict[str, Any]]:
    """Flatten a mesocycle into one record per (week, muscle group)."""
    return [
        _target_record(week, target)
        for week in mesocycle.weeks
        for target in week.muscle_targets
    ]


def mesocycle_to_frame(mesocycle: Mesocycle) -> pd.DataFrame:
    """Flatten a mesocycle into a DataFrame with FRAME_COLUMNS."""
    frame = pd.DataFrame(mesocycle_to_records(mesocycle), columns=FRAME_COLUMNS)
    # target_rir is None outside split mode; keep it as a nullable integer
    frame["target_rir"] = frame["target_rir"].astype("Int64")
    return frame


def mesocycle_to_dict(mesocycle: Mesocycle) -> dict[str, Any]:
    """Convert a mesocycle to a JSON-compatible nested dict."""
    result: dict[str, Any] = {
        "progression_model": mesocycle.progression_model,
        "deload_week": mesocycle.deload_week.week_number,
        "weeks": [
            {
                "week": week.week_number,
                "is_deload": week.is_deload,
                "deload_triggered": week.deload_triggered,
                "target_rir": week.target_rir,
                "muscle_data": {
                    t.muscle_group: {
                        "target_volume": t.target_volume,
                        "target_rpe_compound": t.target_rpe_compound,
                        "target_rpe_isolation": t.target_rpe_isolation,
                        "landmarks": t.landmarks.as_dict(),
                    }
                    for t in week.muscle_targets
                },
                "days": [
                    {
                        "name": day.name,
                        "muscle_groups": list(day.muscle_groups),
                        "target_rir": day.target_rir,
                        "is_deload": day.is_deload,
                    }
                    for day in week.days
                ],
            }
            for week in mesocycle.weeks
        ],
    }
    if mesocycle.split is not None:
        result["split"] = {
            "type": mesocycle.split.split_type.value,
            "days": list(mesocycle.split.day_names),
        }
    return result
