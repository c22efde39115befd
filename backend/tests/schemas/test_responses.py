"""Response Schemas — tests for documented wire shapes."""

import pytest
from pydantic import ValidationError

from pii_service.schemas.responses import ErrorResponse, HealthResponse


def test_health_response_dump_order():
    dumped = HealthResponse(status="ok", version="v1").model_dump()
    assert list(dumped.items()) == [("status", "ok"), ("version", "v1")]


def test_health_response_rejects_other_status():
    with pytest.raises(ValidationError):
        HealthResponse(status="degraded", version="v1")


def test_error_response_validates_envelope():
    parsed = ErrorResponse.model_validate(
        {"error": {"code": "NOT_FOUND", "message": "Route not found."}},
    )
    assert parsed.error.code.value == "NOT_FOUND"


def test_error_response_rejects_unknown_code():
    with pytest.raises(ValidationError):
        ErrorResponse.model_validate({"error": {"code": "OOPS", "message": "x"}})
