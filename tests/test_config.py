"""Tests for EngineConfig: defaults, validation and environment settings."""

from __future__ import annotations

import pytest

from hypertrophy_engine import config as config_module
from hypertrophy_engine.config import EngineConfig, FatigueMask
from hypertrophy_engine.exceptions import ConfigurationError, HypertrophyEngineError
from hypertrophy_engine.models.enums import TrainingAge


class TestDefaults:
    def test_tables_loaded(self) -> None:
        config = EngineConfig()
        assert config.base_mev["legs"] == 14
        assert config.muscle_size_factor["back"] == 0.4
        assert config.frequency_factor[3] == 1.2
        assert config.fatigue_masks["sleep"] == FatigueMask(weight=0.3, threshold=6)
        assert config.training_age_landmarks[TrainingAge.NOVICE] == (6, 10, 12)

    def test_settings(self) -> None:
        config = EngineConfig()
        assert config.autoregulation_policy == "readiness_bands"
        assert config.mesocycle_weeks == 5
        assert config.split_mesocycle_weeks == 4
        assert config.training_frequency == 2

    def test_tables_read_only(self) -> None:
        config = EngineConfig()
        with pytest.raises(TypeError):
            config.base_mev["chest"] = 20  # type: ignore[index]

    def test_plain_dict_copied(self) -> None:
        table = {"chest": 10}
        config = EngineConfig(base_mev=table)
        table["chest"] = 99
        assert config.base_mev["chest"] == 10

    def test_equal_by_value(self) -> None:
        assert EngineConfig() == EngineConfig()


class TestValidation:
    def test_negative_base_mev(self) -> None:
        with pytest.raises(ConfigurationError, match="chest"):
            EngineConfig(base_mev={"chest": -1})

    def test_negative_size_factor(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(muscle_size_factor={"arms": -0.1})

    def test_non_positive_frequency_factor(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(frequency_factor={2: 0.0})

    def test_negative_mask_weight(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(fatigue_masks={"sleep": FatigueMask(weight=-0.3, threshold=6)})

    def test_unordered_landmark_table(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(training_age_landmarks={TrainingAge.BEGINNER: (12, 8, 15)})

    def test_default_age_must_exist(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig(training_age_landmarks={TrainingAge.ADVANCED: (12, 18, 22)})

    def test_errors_share_base(self) -> None:
        assert issubclass(ConfigurationError, HypertrophyEngineError)


class TestOverrides:
    def test_with_base_mev(self) -> None:
        original = EngineConfig()
        updated = original.with_base_mev({"chest": 9})
        assert updated.base_mev["chest"] == 9
        assert original.base_mev["chest"] == 8
        assert updated.fatigue_masks is original.fatigue_masks

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config_module, "AUTOREGULATION_POLICY", "fatigue_mask")
        monkeypatch.setattr(config_module, "MESOCYCLE_WEEKS", 6)
        config = EngineConfig.from_env()
        assert config.autoregulation_policy == "fatigue_mask"
        assert config.mesocycle_weeks == 6
        assert config.split_mesocycle_weeks == config_module.SPLIT_MESOCYCLE_WEEKS
