"""Configuration settings for the SQI engine."""

import os
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from functools import lru_cache
import logging

from config.models.core_models import Difficulty, Importance, QuestionType

load_dotenv()

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# VALUE OBJECTS INJECTED INTO THE PIPELINE
# ----------------------------------------------------------------------

class WeightTables(BaseModel):
    """Multiplicative weight lookups used by the attempt scorer."""
    model_config = ConfigDict(frozen=True)

    importance: Dict[str, float]
    difficulty: Dict[str, float]
    question_type: Dict[str, float]
    fallback: float = 1.0


class RankingWeights(BaseModel):
    """Coefficients and bands used when ranking concepts for the summary."""
    model_config = ConfigDict(frozen=True)

    wrong_weight: float = 0.40
    importance_weight: float = 0.25
    time_weight: float = 0.20
    diagnostic_weight: float = 0.15

    fast_ratio: float = 0.8
    slow_ratio: float = 1.2
    fast_score: float = 1.0
    normal_score: float = 0.7
    slow_score: float = 0.4

    high_importance: float = 1.0
    low_score_threshold: float = 60.0


# ----------------------------------------------------------------------
# SQI CONFIGURATION
# ----------------------------------------------------------------------

class SQIConfig(BaseSettings):
    """SQI scoring configuration."""
    model_config = SettingsConfigDict(env_prefix="SQI_", extra="ignore")

    importance_weights: Dict[str, float] = {
        Importance.A.value: 1.0,
        Importance.B.value: 0.7,
        Importance.C.value: 0.5,
    }
    difficulty_weights: Dict[str, float] = {
        Difficulty.EASY.value: 0.6,
        Difficulty.MEDIUM.value: 1.0,
        Difficulty.HARD.value: 1.4,
    }
    type_weights: Dict[str, float] = {
        QuestionType.PRACTICAL.value: 1.1,
        QuestionType.THEORY.value: 1.0,
    }
    unknown_weight: float = 1.0

    # time decay: ratio of time spent to expected time
    severe_overtime_ratio: float = 2.0
    severe_overtime_factor: float = 0.8
    overtime_ratio: float = 1.5
    overtime_factor: float = 0.9

    review_miss_factor: float = 0.9
    revisit_bonus_rate: float = 0.2

    ranking: RankingWeights = Field(default_factory=RankingWeights)

    prompt_version: str = "v1"
    engine_name: str = "sqi-v0.1"

    def weight_tables(self) -> WeightTables:
        return WeightTables(
            importance=self.importance_weights,
            difficulty=self.difficulty_weights,
            question_type=self.type_weights,
            fallback=self.unknown_weight,
        )


# ----------------------------------------------------------------------
# LOGGING CONFIGURATION
# ----------------------------------------------------------------------

class LoggingConfig(BaseSettings):
    """Logging configuration."""
    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(message)s"


# ----------------------------------------------------------------------
# APP SETTINGS
# ----------------------------------------------------------------------

class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    sqi: SQIConfig = Field(default_factory=SQIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ----------------------------------------------------------------------
# Lazy accessors (cached singletons)
# ----------------------------------------------------------------------

@lru_cache()
def get_config() -> Settings:
    """Return global app configuration."""
    return Settings()


@lru_cache()
def get_sqi_config() -> SQIConfig:
    """Return SQI scoring configuration."""
    return get_config().sqi


@lru_cache()
def get_logging_config() -> LoggingConfig:
    """Return logging configuration."""
    return get_config().logging
