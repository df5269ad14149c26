"""Concept ranker: decides which concepts the summary agent should emphasize."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.settings import RankingWeights, SQIConfig, get_sqi_config
from .score_aggregator import ConceptAccumulator

logger = logging.getLogger(__name__)

WRONG_EARLIER = "Wrong earlier"
HIGH_IMPORTANCE = "High importance (A)"
LOW_DIAGNOSTIC_SCORE = "Low diagnostic score"
SLOW_SOLVE_TIME = "Slow solve time"


@dataclass
class ConceptRanking:
    """Unrounded priority of one concept."""
    weight: float
    reasons: List[str] = field(default_factory=list)


class ConceptRanker:
    """
    Priority weight is a fixed linear combination of four signals:

    - whether the concept was answered wrong at least once
    - the highest importance weight among its attempts
    - a time proxy from the mean time ratio (fast, normal or slow)
    - diagnostic quality, the inverse of the concept's SQI
    """

    def __init__(self, config: Optional[SQIConfig] = None):
        self.config = config or get_sqi_config()
        self.weights: RankingWeights = self.config.ranking
        self.importance_weights = self.config.importance_weights

    def rank(self, concept: ConceptAccumulator) -> ConceptRanking:
        w = self.weights

        has_wrong = 1 if concept.wrong_count > 0 else 0
        max_importance = self._max_importance(concept)
        time_score = self._time_score(concept)
        concept_sqi = concept.sqi
        diagnostic_quality = 1 - concept_sqi / 100

        weight = (
            has_wrong * w.wrong_weight
            + max_importance * w.importance_weight
            + time_score * w.time_weight
            + diagnostic_quality * w.diagnostic_weight
        )

        reasons = []
        if has_wrong:
            reasons.append(WRONG_EARLIER)
        if max_importance == w.high_importance:
            reasons.append(HIGH_IMPORTANCE)
        if concept_sqi < w.low_score_threshold:
            reasons.append(LOW_DIAGNOSTIC_SCORE)
        if time_score == w.slow_score:
            reasons.append(SLOW_SOLVE_TIME)

        logger.debug("Ranked %s/%s: weight=%.4f reasons=%s", concept.topic, concept.concept, weight, reasons)
        return ConceptRanking(weight=weight, reasons=reasons)

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------
    def _max_importance(self, concept: ConceptAccumulator) -> float:
        # grades missing from the table do not contribute
        highest = 0.0
        for attempt in concept.attempts:
            value = self.importance_weights.get(attempt.importance)
            if value is not None and value > highest:
                highest = value
        return highest

    def _time_score(self, concept: ConceptAccumulator) -> float:
        w = self.weights
        if not concept.attempts:
            return w.normal_score

        avg_ratio = sum(a.time_ratio for a in concept.attempts) / len(concept.attempts)
        if avg_ratio < w.fast_ratio:
            return w.fast_score
        if avg_ratio > w.slow_ratio:
            return w.slow_score
        return w.normal_score
