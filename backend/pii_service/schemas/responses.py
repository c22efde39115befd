"""Response Schemas — wire shapes of success and error bodies.

Invariants:
    - HealthResponse.status is the literal "ok"
    - ErrorResponse has exactly one field, `error`
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from pii_service.core.errors import ErrorCode


class HealthResponse(BaseModel):
    """Body of GET /v1/health."""
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"]
    version: str


class ErrorDetail(BaseModel):
    """Envelope carried in the `error` field."""
    code: ErrorCode
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: ErrorDetail
