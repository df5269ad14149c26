"""SQI Score Aggregator — folds attempt scores into per-topic and per-concept totals."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from config.models import Attempt
from processors.attempt_scorer import AttemptScorer

logger = logging.getLogger(__name__)


def normalize_index(weighted: float, max_score: float) -> float:
    """Scale a weighted total to a 0-100 index. A zero denominator yields 0."""
    if max_score <= 0:
        return 0.0
    return max(0.0, min(100.0, weighted / max_score * 100))


@dataclass
class TopicAccumulator:
    topic: str
    weighted: float = 0.0
    max: float = 0.0

    @property
    def sqi(self) -> float:
        return normalize_index(self.weighted, self.max)


@dataclass
class ConceptAccumulator:
    topic: str
    concept: str
    weighted: float = 0.0
    max: float = 0.0
    attempts: List[Attempt] = field(default_factory=list)
    wrong_count: int = 0
    total_count: int = 0

    @property
    def sqi(self) -> float:
        return normalize_index(self.weighted, self.max)


@dataclass
class Aggregation:
    """Running totals for one computation. Dict order is first-seen order."""
    total_weighted: float = 0.0
    total_max: float = 0.0
    topics: Dict[str, TopicAccumulator] = field(default_factory=dict)
    concepts: Dict[Tuple[str, str], ConceptAccumulator] = field(default_factory=dict)

    @property
    def overall_sqi(self) -> float:
        return normalize_index(self.total_weighted, self.total_max)


class ScoreAggregator:
    """
    Aggregates attempt-level scores in a single left-to-right pass.
    Keys are created on first occurrence and updated in place afterwards.
    """

    def __init__(self, scorer: Optional[AttemptScorer] = None):
        self.scorer = scorer or AttemptScorer()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------
    def aggregate(self, attempts: Iterable[Attempt]) -> Aggregation:
        """Fold all attempts into a fresh Aggregation."""
        aggregation = Aggregation()

        for attempt in attempts:
            self._add(aggregation, attempt)

        logger.debug(
            "Aggregated %d topics and %d concepts (weighted=%.4f, max=%.4f)",
            len(aggregation.topics), len(aggregation.concepts),
            aggregation.total_weighted, aggregation.total_max,
        )
        return aggregation

    # -------------------------------------------------------------------------
    # Internal Aggregation Logic
    # -------------------------------------------------------------------------
    def _add(self, aggregation: Aggregation, attempt: Attempt) -> None:
        score = self.scorer.score(attempt)

        aggregation.total_weighted += score.weighted_score
        aggregation.total_max += score.max_possible_score

        topic_entry = aggregation.topics.get(attempt.topic)
        if topic_entry is None:
            topic_entry = aggregation.topics[attempt.topic] = TopicAccumulator(topic=attempt.topic)
        topic_entry.weighted += score.weighted_score
        topic_entry.max += score.max_possible_score

        key = (attempt.topic, attempt.concept)
        concept_entry = aggregation.concepts.get(key)
        if concept_entry is None:
            concept_entry = aggregation.concepts[key] = ConceptAccumulator(
                topic=attempt.topic, concept=attempt.concept
            )
        concept_entry.weighted += score.weighted_score
        concept_entry.max += score.max_possible_score
        concept_entry.attempts.append(attempt)
        if not attempt.correct:
            concept_entry.wrong_count += 1
        concept_entry.total_count += 1
