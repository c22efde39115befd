"""Error Vocabulary — closed error codes and the uniform error envelope.

Invariants:
    - ErrorCode is a closed set: NOT_IMPLEMENTED, INVALID_INPUT, INTERNAL_ERROR, NOT_FOUND
    - ErrorEnvelope is immutable once constructed
    - Messages never contain request data (zero retention)

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
    - INVALID_INPUT is declared but unreachable until input validation exists
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Canonical error codes returned by all v1 endpoints."""
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_FOUND = "NOT_FOUND"


# ─── Fixed messages ──────────────────────────────────────────────

ROUTE_NOT_FOUND_MESSAGE = "Route not found."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


@dataclass(frozen=True)
class ErrorEnvelope:
    """Payload of the `error` field in every error response."""
    code: ErrorCode
    message: str

    def __post_init__(self):
        object.__setattr__(self, "code", ErrorCode(self.code))

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


def make_error(code: ErrorCode, message: str) -> ErrorEnvelope:
    """Build an envelope. The message is taken as-is; callers keep it free of request data."""
    return ErrorEnvelope(code=code, message=message)
