"""Attempt scorer for the SQI engine: turns one attempt into a weighted score."""

import logging
from typing import Dict, Optional

from config.models import Attempt, AttemptScore
from config.settings import SQIConfig, WeightTables, get_sqi_config
from services.errors import InvalidAttemptError

logger = logging.getLogger(__name__)


class AttemptScorer:
    """
    Scores a single attempt against the configured weight tables.

    The maximum possible score is the weighted mark of a fully correct,
    unpenalized attempt. Time decay and the review-miss penalty only touch
    the weighted score; the revisit bonus is added unscaled and may push
    the weighted score above the maximum.
    """

    def __init__(self, weights: Optional[WeightTables] = None, config: Optional[SQIConfig] = None):
        self.config = config or get_sqi_config()
        self.weights = weights or self.config.weight_tables()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def score(self, attempt: Attempt) -> AttemptScore:
        if attempt.expected_time_sec <= 0:
            raise InvalidAttemptError(
                f"expected_time_sec must be positive "
                f"(topic={attempt.topic!r}, concept={attempt.concept!r}, "
                f"got {attempt.expected_time_sec})"
            )

        base = attempt.marks if attempt.correct else -attempt.neg_marks

        importance_w = self._lookup(self.weights.importance, attempt.importance, "importance")
        difficulty_w = self._lookup(self.weights.difficulty, attempt.difficulty, "difficulty")
        type_w = self._lookup(self.weights.question_type, attempt.question_type, "type")

        max_possible = attempt.marks * importance_w * difficulty_w * type_w
        weighted = base * importance_w * difficulty_w * type_w

        weighted = self._apply_time_decay(weighted, attempt.time_ratio)

        if attempt.marked_review and not attempt.correct:
            weighted *= self.config.review_miss_factor

        if attempt.revisits > 0 and attempt.correct:
            weighted += self.config.revisit_bonus_rate * attempt.marks

        logger.debug(
            "Scored attempt %s/%s: weighted=%.4f max=%.4f",
            attempt.topic, attempt.concept, weighted, max_possible,
        )
        return AttemptScore(weighted_score=weighted, max_possible_score=max_possible)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _lookup(self, table: Dict[str, float], key: str, field: str) -> float:
        if key in table:
            return table[key]
        logger.debug("Unknown %s value %r; using fallback weight %.2f", field, key, self.weights.fallback)
        return self.weights.fallback

    def _apply_time_decay(self, weighted: float, ratio: float) -> float:
        if ratio > self.config.severe_overtime_ratio:
            return weighted * self.config.severe_overtime_factor
        if ratio > self.config.overtime_ratio:
            return weighted * self.config.overtime_factor
        return weighted
