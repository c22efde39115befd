"""Health Handler — liveness payload for GET /v1/health.

Invariants:
    - Always returns 200 with {"status": "ok", "version": "v1"}
    - No inputs, no side effects, no error path
"""

from pii_service.core.handler_result import Success
from pii_service.schemas.responses import HealthResponse

API_VERSION = "v1"


def handle_health() -> Success:
    """Returns a schema-valid health payload."""
    return Success(HealthResponse(status="ok", version=API_VERSION).model_dump())
