"""Exceptions raised by the SQI engine."""


class SQIError(ValueError):
    """Base class for all SQI engine errors."""

    kind = "error"


class MalformedInputError(SQIError):
    """The payload could not be parsed into a JSON object."""

    kind = "malformed input"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed input: {detail}")


class SchemaValidationError(SQIError):
    """The payload parsed but does not match the attempt schema."""

    kind = "schema violation"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid schema: {detail}")


class InvalidAttemptError(SQIError):
    """An attempt cannot be scored (non-positive expected time)."""

    kind = "invalid attempt"
