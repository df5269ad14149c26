"""Scoring, aggregation and result assembly for the SQI engine."""

from .main import SQIService, calculate_sqi
from .score_aggregator import ScoreAggregator, Aggregation
from .concept_ranker import ConceptRanker
from .result_assembler import ResultAssembler
from .json_exporter import JSONExporter

__all__ = [
    "SQIService", "calculate_sqi", "ScoreAggregator", "Aggregation",
    "ConceptRanker", "ResultAssembler", "JSONExporter"
]
