"""Input data models for the SQI engine."""

from enum import Enum
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ----------------------------------------------------------------------
# ENUMERATIONS
# ----------------------------------------------------------------------

class Importance(str, Enum):
    """Syllabus importance of a question."""
    A = "A"
    B = "B"
    C = "C"


class Difficulty(str, Enum):
    """Difficulty band of a question."""
    EASY = "E"
    MEDIUM = "M"
    HARD = "H"


class QuestionType(str, Enum):
    """Kind of question attempted."""
    PRACTICAL = "Practical"
    THEORY = "Theory"


# ----------------------------------------------------------------------
# ATTEMPT MODELS
# ----------------------------------------------------------------------

class Attempt(BaseModel):
    """
    One answered question event.

    `importance`, `difficulty` and `type` are kept as plain strings so that
    values outside the known enums still load; the scorer weights them with
    the configured fallback.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    topic: str
    concept: str
    correct: bool
    marks: float = Field(ge=0)
    neg_marks: float = Field(ge=0)
    importance: str
    difficulty: str
    question_type: str = Field(alias="type")
    time_spent_sec: float = Field(ge=0)
    expected_time_sec: float
    marked_review: bool
    revisits: int = Field(ge=0)

    @field_validator("importance", "difficulty", "question_type", mode="before")
    @classmethod
    def _grade_as_text(cls, value: Any) -> Any:
        # null or numeric grades load as text and get the fallback weight
        if value is None:
            return ""
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    @property
    def time_ratio(self) -> float:
        """Time spent relative to the time the question is expected to take."""
        return self.time_spent_sec / self.expected_time_sec


class SQIRequest(BaseModel):
    """Validated computation request: a student and their ordered attempts."""

    student_id: str = Field(min_length=1)
    attempts: List[Attempt]

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "student_id": "S123",
                "attempts": [
                    {
                        "topic": "Thermodynamics",
                        "concept": "First law",
                        "correct": True,
                        "marks": 4,
                        "neg_marks": 1,
                        "importance": "A",
                        "difficulty": "M",
                        "type": "Theory",
                        "time_spent_sec": 60,
                        "expected_time_sec": 90,
                        "marked_review": False,
                        "revisits": 0,
                    }
                ],
            }
        },
    )
