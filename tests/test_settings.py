"""Tests for SQI configuration loading."""

import pytest

from config.settings import RankingWeights, SQIConfig, get_config, get_sqi_config


def test_default_weight_tables():
    tables = SQIConfig().weight_tables()
    assert tables.importance == {"A": 1.0, "B": 0.7, "C": 0.5}
    assert tables.difficulty == {"E": 0.6, "M": 1.0, "H": 1.4}
    assert tables.question_type == {"Practical": 1.1, "Theory": 1.0}
    assert tables.fallback == 1.0


def test_ranking_coefficients_sum_to_one():
    w = RankingWeights()
    assert w.wrong_weight + w.importance_weight + w.time_weight + w.diagnostic_weight == pytest.approx(1.0)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SQI_IMPORTANCE_WEIGHTS", '{"A": 0.9, "B": 0.6}')
    monkeypatch.setenv("SQI_ENGINE_NAME", "sqi-test")
    config = SQIConfig()
    assert config.importance_weights == {"A": 0.9, "B": 0.6}
    assert config.engine_name == "sqi-test"


def test_accessors_are_cached():
    assert get_config() is get_config()
    assert get_sqi_config() is get_config().sqi
