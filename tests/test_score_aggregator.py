"""Tests for the score aggregator."""

import pytest

from services.aggregator.score_aggregator import ScoreAggregator, normalize_index
from processors.attempt_scorer import AttemptScorer


@pytest.fixture
def aggregator(config):
    return ScoreAggregator(AttemptScorer(config=config))


def test_empty_attempts_yield_zero_accumulators(aggregator):
    aggregation = aggregator.aggregate([])
    assert aggregation.total_weighted == 0
    assert aggregation.total_max == 0
    assert aggregation.topics == {}
    assert aggregation.concepts == {}
    assert aggregation.overall_sqi == 0


def test_groups_preserve_first_seen_order(aggregator, make_attempt):
    attempts = [
        make_attempt(topic="Optics", concept="Refraction"),
        make_attempt(topic="Mechanics", concept="Friction"),
        make_attempt(topic="Optics", concept="Lenses"),
        make_attempt(topic="Optics", concept="Refraction", correct=False),
    ]
    aggregation = aggregator.aggregate(attempts)

    assert list(aggregation.topics) == ["Optics", "Mechanics"]
    assert list(aggregation.concepts) == [
        ("Optics", "Refraction"),
        ("Mechanics", "Friction"),
        ("Optics", "Lenses"),
    ]


def test_concept_accumulator_tracks_counts_and_attempts(aggregator, make_attempt):
    first = make_attempt(concept="Friction")
    second = make_attempt(concept="Friction", correct=False)
    aggregation = aggregator.aggregate([first, second])

    entry = aggregation.concepts[("Mechanics", "Friction")]
    assert entry.attempts == [first, second]
    assert entry.wrong_count == 1
    assert entry.total_count == 2
    assert entry.weighted == pytest.approx(8.0)
    assert entry.max == pytest.approx(20.0)


def test_same_concept_name_under_different_topics_is_separate(aggregator, make_attempt):
    aggregation = aggregator.aggregate([
        make_attempt(topic="Optics", concept="Basics"),
        make_attempt(topic="Mechanics", concept="Basics"),
    ])
    assert len(aggregation.concepts) == 2


def test_global_totals_match_topic_totals(aggregator, make_attempt):
    aggregation = aggregator.aggregate([
        make_attempt(topic="Optics"),
        make_attempt(topic="Mechanics", importance="C", correct=False),
    ])
    assert aggregation.total_weighted == pytest.approx(sum(t.weighted for t in aggregation.topics.values()))
    assert aggregation.total_max == pytest.approx(sum(t.max for t in aggregation.topics.values()))


@pytest.mark.parametrize(
    "weighted, max_score, expected",
    [
        (5, 10, 50.0),
        (-3, 10, 0.0),
        (12, 10, 100.0),
        (4, 0, 0.0),
    ],
)
def test_normalize_index(weighted, max_score, expected):
    assert normalize_index(weighted, max_score) == pytest.approx(expected)
