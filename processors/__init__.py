"""Attempt-level processors for the SQI engine."""

from .attempt_scorer import AttemptScorer

__all__ = ["AttemptScorer"]
