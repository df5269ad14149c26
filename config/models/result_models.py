"""Output models for the SQI engine: the payload handed to the summary agent."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class AttemptScore(BaseModel):
    """Weighted outcome of a single attempt."""
    model_config = ConfigDict(frozen=True)

    weighted_score: float
    max_possible_score: float = Field(ge=0)


class TopicScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str
    sqi: float = Field(ge=0, le=100)


class ConceptScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str
    concept: str
    sqi: float = Field(ge=0, le=100)


class RankedConcept(BaseModel):
    """A concept prioritized for the summary, with the reasons it was surfaced."""
    model_config = ConfigDict(frozen=True)

    topic: str
    concept: str
    weight: float = Field(ge=0, le=1)
    reasons: List[str] = Field(default_factory=list)


class SQIMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    diagnostic_prompt_version: str
    computed_at: str
    engine: str


class SQIResult(BaseModel):
    """Final per-student SQI result."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "student_id": "S123",
                "overall_sqi": 72.4,
                "topic_scores": [{"topic": "Thermodynamics", "sqi": 72.4}],
                "concept_scores": [
                    {"topic": "Thermodynamics", "concept": "First law", "sqi": 72.4}
                ],
                "ranked_concepts_for_summary": [
                    {
                        "topic": "Thermodynamics",
                        "concept": "First law",
                        "weight": 0.83,
                        "reasons": ["Wrong earlier", "High importance (A)"],
                    }
                ],
                "metadata": {
                    "diagnostic_prompt_version": "v1",
                    "computed_at": "2025-11-12T10:15:00.000Z",
                    "engine": "sqi-v0.1",
                },
            }
        },
    )

    student_id: str
    overall_sqi: float = Field(0.0, ge=0, le=100)
    topic_scores: List[TopicScore] = Field(default_factory=list)
    concept_scores: List[ConceptScore] = Field(default_factory=list)
    ranked_concepts_for_summary: List[RankedConcept] = Field(default_factory=list)
    metadata: SQIMetadata
