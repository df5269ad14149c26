"""Shared fixtures for SQI engine tests."""

from datetime import datetime, timezone

import pytest

from config.models import Attempt
from config.settings import SQIConfig
from services.aggregator.main import SQIService

FIXED_NOW = datetime(2025, 11, 12, 10, 15, 0, 123000, tzinfo=timezone.utc)


def make_attempt_data(**overrides):
    data = {
        "topic": "Mechanics",
        "concept": "Newton's laws",
        "correct": True,
        "marks": 10,
        "neg_marks": 2,
        "importance": "A",
        "difficulty": "M",
        "type": "Theory",
        "time_spent_sec": 50,
        "expected_time_sec": 100,
        "marked_review": False,
        "revisits": 0,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_attempt():
    def _make(**overrides):
        return Attempt.model_validate(make_attempt_data(**overrides))
    return _make


@pytest.fixture
def config():
    return SQIConfig()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def service(config, fixed_clock):
    return SQIService(config=config, clock=fixed_clock)


@pytest.fixture
def attempt_data():
    return make_attempt_data
