"""Result assembler: turns aggregated totals into the final SQIResult payload."""

import logging
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional

from config.models import (
    ConceptScore,
    RankedConcept,
    SQIMetadata,
    SQIResult,
    TopicScore,
)
from config.settings import SQIConfig, get_sqi_config
from .concept_ranker import ConceptRanker
from .score_aggregator import Aggregation

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

INDEX_DECIMALS = 1
WEIGHT_DECIMALS = 2


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of `value`, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a trailing Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResultAssembler:
    """
    Builds an SQIResult from an Aggregation.

    All math upstream is unrounded; indices are rounded to one decimal and
    ranking weights to two decimals here, exactly once. Ranked concepts are
    sorted by weight descending with a stable sort, so equal weights keep
    first-seen order.
    """

    def __init__(
        self,
        ranker: Optional[ConceptRanker] = None,
        config: Optional[SQIConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config or get_sqi_config()
        self.ranker = ranker or ConceptRanker(self.config)
        self.clock = clock or utc_now

    def assemble(self, student_id: str, aggregation: Aggregation) -> SQIResult:
        topic_scores = [
            TopicScore(topic=entry.topic, sqi=round_half_up(entry.sqi, INDEX_DECIMALS))
            for entry in aggregation.topics.values()
        ]

        concept_scores: List[ConceptScore] = []
        ranked: List[RankedConcept] = []
        for entry in aggregation.concepts.values():
            # score and ranking read the same accumulator
            concept_scores.append(
                ConceptScore(
                    topic=entry.topic,
                    concept=entry.concept,
                    sqi=round_half_up(entry.sqi, INDEX_DECIMALS),
                )
            )
            ranking = self.ranker.rank(entry)
            weight = max(0.0, min(1.0, ranking.weight))
            ranked.append(
                RankedConcept(
                    topic=entry.topic,
                    concept=entry.concept,
                    weight=round_half_up(weight, WEIGHT_DECIMALS),
                    reasons=ranking.reasons,
                )
            )

        ranked.sort(key=lambda r: r.weight, reverse=True)

        return SQIResult(
            student_id=student_id,
            overall_sqi=round_half_up(aggregation.overall_sqi, INDEX_DECIMALS),
            topic_scores=topic_scores,
            concept_scores=concept_scores,
            ranked_concepts_for_summary=ranked,
            metadata=self._metadata(),
        )

    def _metadata(self) -> SQIMetadata:
        return SQIMetadata(
            diagnostic_prompt_version=self.config.prompt_version,
            computed_at=format_timestamp(self.clock()),
            engine=self.config.engine_name,
        )
