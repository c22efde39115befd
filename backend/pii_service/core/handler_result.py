"""Handler Results — tagged success/failure outcomes returned by route handlers.

Invariants:
    - Handlers return a HandlerResult, never raise
    - Success bodies never contain an `error` field
    - Failure bodies contain exactly one field: `error`
    - The HTTP status travels with the result (never inferred from the request method)

Design Decisions:
    - Two frozen dataclasses over a status-bearing dict: the dispatcher pattern-matches
      on the variant, so a new handler cannot forget to pick a status
"""

from dataclasses import dataclass, field
from typing import Any, Union

from pii_service.core.errors import ErrorEnvelope


@dataclass(frozen=True)
class Success:
    """Successful handler outcome carrying a JSON-serializable payload."""
    body: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200

    def __post_init__(self):
        if "error" in self.body:
            raise ValueError("Success body must not contain an 'error' field")

    def to_body(self) -> dict[str, Any]:
        return dict(self.body)


@dataclass(frozen=True)
class Failure:
    """Failed handler outcome carrying an error envelope and its HTTP status."""
    envelope: ErrorEnvelope
    status_code: int

    def to_body(self) -> dict[str, Any]:
        return {"error": self.envelope.to_dict()}


HandlerResult = Union[Success, Failure]
