"""Payload parser for SQI ingestion: raw attempt JSON to a validated SQIRequest."""

import json
import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from config.models import SQIRequest
from services.errors import MalformedInputError, SchemaValidationError

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, bytearray, Dict[str, Any]]

MISSING_FIELDS_MESSAGE = "Must have 'student_id' and 'attempts' array."


class PayloadParser:
    """
    Parses student attempt payloads.

    Supported shapes:
      • dict already decoded from JSON
      • JSON string
      • UTF-8 JSON bytes
    Anything that does not decode to a JSON object is malformed input; an
    object without a usable `student_id` or `attempts` array, or with an
    attempt record that fails validation, is a schema violation.
    """

    def parse(self, payload: Payload) -> SQIRequest:
        data = self._decode(payload)
        self._check_required_fields(data)

        try:
            request = SQIRequest.model_validate(data)
        except ValidationError as e:
            raise SchemaValidationError(self._describe(e)) from e

        logger.info("Parsed payload for student %s with %d attempts", request.student_id, len(request.attempts))
        return request

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------
    def _decode(self, payload: Payload) -> Dict[str, Any]:
        if isinstance(payload, dict):
            return payload

        if isinstance(payload, (bytes, bytearray)):
            payload = self._decode_bytes(bytes(payload))

        if not isinstance(payload, str):
            raise MalformedInputError(f"unsupported payload type {type(payload).__name__}")

        if not payload.strip():
            raise MalformedInputError("payload is empty; expected student attempt data JSON")

        try:
            parsed = json.loads(payload)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"{e.msg} (line {e.lineno}, column {e.colno})") from e

        if not isinstance(parsed, dict):
            raise MalformedInputError(f"expected a JSON object, got {type(parsed).__name__}")
        return parsed

    def _decode_bytes(self, raw: bytes) -> str:
        # utf-8-sig also drops a leading byte order mark
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"payload is not valid UTF-8 ({e.reason})") from e

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _check_required_fields(self, data: Dict[str, Any]) -> None:
        student_id = data.get("student_id")
        attempts = data.get("attempts")
        if not student_id or not isinstance(student_id, str) or not isinstance(attempts, list):
            raise SchemaValidationError(MISSING_FIELDS_MESSAGE)

    def _describe(self, error: ValidationError) -> str:
        issues = []
        for item in error.errors():
            location = ".".join(str(part) for part in item["loc"])
            issues.append(f"{location}: {item['msg']}")
        return "; ".join(issues)
