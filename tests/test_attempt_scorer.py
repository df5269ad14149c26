"""Tests for the attempt scorer."""

import pytest

from config.settings import WeightTables
from processors.attempt_scorer import AttemptScorer
from services.errors import InvalidAttemptError


@pytest.fixture
def scorer(config):
    return AttemptScorer(config=config)


def test_correct_attempt_scores_full_marks(scorer, make_attempt):
    score = scorer.score(make_attempt())
    assert score.weighted_score == pytest.approx(10.0)
    assert score.max_possible_score == pytest.approx(10.0)


def test_wrong_attempt_uses_negative_marks(scorer, make_attempt):
    score = scorer.score(make_attempt(correct=False))
    assert score.weighted_score == pytest.approx(-2.0)
    assert score.max_possible_score == pytest.approx(10.0)


def test_weights_multiply(scorer, make_attempt):
    score = scorer.score(make_attempt(importance="B", difficulty="H", type="Practical"))
    expected = 10 * 0.7 * 1.4 * 1.1
    assert score.weighted_score == pytest.approx(expected)
    assert score.max_possible_score == pytest.approx(expected)


def test_severe_overtime_decays_score_only(scorer, make_attempt):
    score = scorer.score(make_attempt(importance="C", difficulty="E", time_spent_sec=250))
    assert score.max_possible_score == pytest.approx(3.0)
    assert score.weighted_score == pytest.approx(2.4)


def test_moderate_overtime_decay(scorer, make_attempt):
    score = scorer.score(make_attempt(time_spent_sec=160))
    assert score.weighted_score == pytest.approx(9.0)


def test_ratio_at_threshold_is_not_decayed(scorer, make_attempt):
    assert scorer.score(make_attempt(time_spent_sec=150)).weighted_score == pytest.approx(10.0)
    assert scorer.score(make_attempt(time_spent_sec=200)).weighted_score == pytest.approx(9.0)


def test_review_miss_compounds_with_time_decay(scorer, make_attempt):
    attempt = make_attempt(correct=False, marked_review=True, time_spent_sec=300)
    score = scorer.score(attempt)
    assert score.weighted_score == pytest.approx(-2 * 0.8 * 0.9)


def test_review_on_correct_attempt_has_no_penalty(scorer, make_attempt):
    score = scorer.score(make_attempt(marked_review=True))
    assert score.weighted_score == pytest.approx(10.0)


def test_revisit_bonus_is_unscaled_and_can_exceed_max(scorer, make_attempt):
    score = scorer.score(make_attempt(importance="B", marks=5, revisits=2))
    assert score.max_possible_score == pytest.approx(3.5)
    assert score.weighted_score == pytest.approx(3.5 + 1.0)
    assert score.weighted_score > score.max_possible_score


def test_revisit_bonus_requires_correct_answer(scorer, make_attempt):
    score = scorer.score(make_attempt(correct=False, revisits=3))
    assert score.weighted_score == pytest.approx(-2.0)


def test_unknown_enum_values_fall_back_to_one(scorer, make_attempt):
    score = scorer.score(make_attempt(importance="Z", difficulty="X", type="Lab"))
    assert score.weighted_score == pytest.approx(10.0)
    assert score.max_possible_score == pytest.approx(10.0)


def test_weight_tables_can_be_injected(make_attempt):
    tables = WeightTables(importance={"A": 2.0}, difficulty={}, question_type={}, fallback=0.5)
    score = AttemptScorer(weights=tables).score(make_attempt())
    assert score.max_possible_score == pytest.approx(10 * 2.0 * 0.5 * 0.5)


@pytest.mark.parametrize("expected", [0, -5])
def test_non_positive_expected_time_is_rejected(scorer, make_attempt, expected):
    with pytest.raises(InvalidAttemptError):
        scorer.score(make_attempt(expected_time_sec=expected))
