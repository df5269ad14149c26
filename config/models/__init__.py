from .core_models import (
    Importance,
    Difficulty,
    QuestionType,
    Attempt,
    SQIRequest,
)
from .result_models import (
    AttemptScore,
    TopicScore,
    ConceptScore,
    RankedConcept,
    SQIMetadata,
    SQIResult,
)

__all__ = [
    "Importance",
    "Difficulty",
    "QuestionType",
    "Attempt",
    "SQIRequest",
    "AttemptScore",
    "TopicScore",
    "ConceptScore",
    "RankedConcept",
    "SQIMetadata",
    "SQIResult",
]
