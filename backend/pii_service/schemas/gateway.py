"""Gateway Schemas — transport-facing request/response shapes for the HTTP gateway.

Invariants:
    - GatewayRequest carries only method, path and an optional request id;
      body, headers and query string are never read
    - GatewayResponse always carries Content-Type: application/json
    - Response bodies are compact UTF-8 JSON; NaN and Infinity are rejected

Design Decisions:
    - from_event accepts both proxy payload formats (REST v1, HTTP API v2)
    - Missing method/path become "" so the dispatcher answers 404 instead of failing
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

JSON_CONTENT_TYPE = "application/json"


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def json_headers() -> dict[str, str]:
    return {"Content-Type": JSON_CONTENT_TYPE}


def serialize_body(body: Any) -> str:
    return json.dumps(
        body, separators=(",", ":"), ensure_ascii=False, allow_nan=False,
    )


class GatewayRequest(BaseModel):
    """Inbound request as seen by the dispatcher."""
    model_config = ConfigDict(frozen=True)

    method: str = ""
    path: str = ""
    request_id: str | None = None

    @classmethod
    def from_event(cls, event: dict[str, Any] | None) -> "GatewayRequest":
        """Extract method, path and request id from a gateway proxy event."""
        event = event if isinstance(event, dict) else {}
        context = _as_dict(event.get("requestContext"))
        http = _as_dict(context.get("http"))
        method = event.get("httpMethod") or http.get("method") or ""
        path = event.get("path") or event.get("rawPath") or http.get("path") or ""
        request_id = context.get("requestId")
        return cls(
            method=str(method),
            path=str(path),
            request_id=str(request_id) if request_id is not None else None,
        )


class GatewayResponse(BaseModel):
    """Outbound response handed back to the gateway."""
    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = Field(default_factory=json_headers)
    body: str

    @classmethod
    def from_body(cls, status_code: int, body: Any) -> "GatewayResponse":
        return cls(status_code=status_code, body=serialize_body(body))

    def to_event(self) -> dict[str, Any]:
        """Proxy integration response format."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
