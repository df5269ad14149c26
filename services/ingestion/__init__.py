"""Ingestion of student attempt payloads for the SQI engine."""

from .payload_parser import PayloadParser

__all__ = ["PayloadParser"]
