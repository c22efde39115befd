"""Cloud Function Entry Point — gateway proxy event in, proxy response out.

Invariants:
    - Exactly one request dispatched per invocation
    - Only method, path and request id are extracted from the event (zero retention)
    - Always returns a proxy response dict; never raises to the runtime

Design Decisions:
    - Logging configured at cold start and reused across warm invocations;
      under the Lambda runtime its pre-installed root handler is replaced
"""

import logging
import os
from typing import Any

from pii_service.config import get_settings
from pii_service.infrastructure.observability import setup_logging
from pii_service.schemas.gateway import GatewayRequest
from pii_service.services.dispatch import dispatch

logger = logging.getLogger(__name__)

_settings = get_settings()
setup_logging(
    _settings.log_level,
    _settings.log_format,
    replace_handlers="AWS_LAMBDA_FUNCTION_NAME" in os.environ,
)


def handler(event: dict[str, Any] | None, context: Any = None) -> dict[str, Any]:
    """Lambda entry point — thin adapter dispatching to per-route handler functions."""
    request = GatewayRequest.from_event(event)
    response = dispatch(request)
    return response.to_event()
