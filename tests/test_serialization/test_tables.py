"""Tests for mesocycle table and dict exports."""

import json

import pandas as pd
import pytest

from hypertrophy_engine.mesocycle.generator import MesocycleGenerator
from hypertrophy_engine.models.mesocycle import Mesocycle
from hypertrophy_engine.models.profile import UserProfile
from hypertrophy_engine.serialization import (
    FRAME_COLUMNS,
    mesocycle_to_dict,
    mesocycle_to_frame,
    mesocycle_to_records,
)


@pytest.fixture
def list_mesocycle(reference_profile: UserProfile) -> Mesocycle:
    return MesocycleGenerator(reference_profile).generate(["chest", "legs"], length=3)


@pytest.fixture
def split_mesocycle(reference_profile: UserProfile) -> Mesocycle:
    return MesocycleGenerator(reference_profile).generate_split(length=4)


class TestRecords:
    def test_one_record_per_week_and_muscle(self, list_mesocycle: Mesocycle) -> None:
        records = mesocycle_to_records(list_mesocycle)
        assert len(records) == 8
        assert records[0]["week"] == 1
        assert records[0]["muscle_group"] == "chest"
        assert records[-1]["is_deload"] is True


class TestFrame:
    def test_columns_and_shape(self, list_mesocycle: Mesocycle) -> None:
        frame = mesocycle_to_frame(list_mesocycle)
        assert list(frame.columns) == FRAME_COLUMNS
        assert frame.shape == (8, len(FRAME_COLUMNS))

    def test_deload_rows(self, list_mesocycle: Mesocycle) -> None:
        frame = mesocycle_to_frame(list_mesocycle)
        deload = frame[frame["is_deload"]]
        assert deload["week"].unique().tolist() == [4]
        assert deload.set_index("muscle_group")["target_volume"].to_dict() == {
            "chest": 6,
            "legs": 12,
        }

    def test_rir_missing_outside_split_mode(self, list_mesocycle: Mesocycle) -> None:
        frame = mesocycle_to_frame(list_mesocycle)
        assert str(frame["target_rir"].dtype) == "Int64"
        assert frame["target_rir"].isna().all()

    def test_split_rir_per_week(self, split_mesocycle: Mesocycle) -> None:
        frame = mesocycle_to_frame(split_mesocycle)
        by_week = frame.groupby("week")["target_rir"].first()
        assert by_week.tolist() == [3, 2, 1, 4]

    def test_weekly_totals(self, list_mesocycle: Mesocycle) -> None:
        totals = mesocycle_to_frame(list_mesocycle).groupby("week")["target_volume"].sum()
        expected = pd.Series(
            [w.total_volume for w in list_mesocycle.weeks],
            index=pd.Index([1, 2, 3, 4], name="week"),
            name="target_volume",
        )
        pd.testing.assert_series_equal(totals, expected, check_dtype=False)

    def test_empty_mesocycle(self) -> None:
        frame = mesocycle_to_frame(Mesocycle(weeks=()))
        assert frame.empty
        assert list(frame.columns) == FRAME_COLUMNS


class TestDict:
    def test_list_mode(self, list_mesocycle: Mesocycle) -> None:
        data = mesocycle_to_dict(list_mesocycle)
        assert data["progression_model"] == "double"
        assert data["deload_week"] == 4
        assert "split" not in data
        chest = data["weeks"][0]["muscle_data"]["chest"]
        assert chest["target_volume"] == 11
        assert chest["landmarks"] == {"mv": 6, "mev": 10, "mav": 24, "mrv": 30}

    def test_split_mode(self, split_mesocycle: Mesocycle) -> None:
        data = mesocycle_to_dict(split_mesocycle)
        assert data["split"] == {
            "type": "upper-lower",
            "days": ["Upper A", "Lower A", "Upper B", "Lower B"],
        }
        last = data["weeks"][-1]
        assert last["is_deload"] is True
        assert last["target_rir"] == 4
        assert last["days"][0] == {
            "name": "Upper A",
            "muscle_groups": ["chest", "back", "shoulders", "arms"],
            "target_rir": 4,
            "is_deload": True,
        }

    def test_json_compatible(self, split_mesocycle: Mesocycle) -> None:
        assert json.loads(json.dumps(mesocycle_to_dict(split_mesocycle)))
