"""Dispatcher — maps an inbound (method, path) to exactly one handler and builds the response.

Invariants:
    - dispatch() never raises: unknown routes → 404 NOT_FOUND, handler exceptions → 500 INTERNAL_ERROR
    - Status code comes from the handler result, never from the HTTP method
    - Every response is JSON with Content-Type: application/json
    - Zero retention: only matched route keys are logged; unmatched paths and bodies never are

Design Decisions:
    - ROUTE_TABLE built once at import and read-only afterwards
    - routes injectable for tests; production callers use the default table
"""

import logging
from typing import Mapping

from pii_service.core.errors import (
    ErrorCode,
    ErrorEnvelope,
    INTERNAL_ERROR_MESSAGE,
    ROUTE_NOT_FOUND_MESSAGE,
    make_error,
)
from pii_service.core.handler_result import Failure, HandlerResult, Success
from pii_service.core.routing import (
    RouteHandler,
    RouteKey,
    build_route_key,
    build_route_table,
)
from pii_service.schemas.gateway import GatewayRequest, GatewayResponse
from pii_service.services.handle_health import handle_health
from pii_service.services.handle_pii import (
    handle_pii_anonymize,
    handle_pii_detect,
    handle_pii_detect_and_anonymize,
)

logger = logging.getLogger(__name__)

ROUTE_TABLE: Mapping[str, RouteHandler] = build_route_table({
    RouteKey("GET", "/v1/health"): handle_health,
    RouteKey("POST", "/v1/pii/detect"): handle_pii_detect,
    RouteKey("POST", "/v1/pii/anonymize"): handle_pii_anonymize,
    RouteKey("POST", "/v1/pii/detect-and-anonymize"): handle_pii_detect_and_anonymize,
})

NOT_FOUND_RESULT = Failure(make_error(ErrorCode.NOT_FOUND, ROUTE_NOT_FOUND_MESSAGE), 404)
INTERNAL_ERROR_RESULT = Failure(
    make_error(ErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE), 500,
)


def dispatch(
    request: GatewayRequest,
    routes: Mapping[str, RouteHandler] = ROUTE_TABLE,
) -> GatewayResponse:
    """Route a single request to its handler and serialize the outcome."""
    route_key = build_route_key(request.method, request.path)
    route_handler = routes.get(route_key)

    if route_handler is None:
        logger.info(
            "Route not found",
            extra={
                "method": request.method.upper(),
                "status_code": NOT_FOUND_RESULT.status_code,
                "request_id": request.request_id,
            },
        )
        return _to_response(NOT_FOUND_RESULT)

    result = _invoke(route_handler, route_key, request.request_id)
    logger.info(
        f"{route_key} -> {result.status_code}",
        extra={
            "route_key": route_key,
            "status_code": result.status_code,
            "error_code": _error_code(result),
            "request_id": request.request_id,
        },
    )
    return _to_response(result)


def _invoke(
    route_handler: RouteHandler, route_key: str, request_id: str | None,
) -> HandlerResult:
    try:
        result = route_handler()
    except Exception as exc:
        logger.error(
            f"Handler for {route_key} raised {type(exc).__name__}",
            extra={"route_key": route_key, "request_id": request_id},
            exc_info=True,
        )
        return INTERNAL_ERROR_RESULT
    if not isinstance(result, (Success, Failure)) or (
        isinstance(result, Failure) and not isinstance(result.envelope, ErrorEnvelope)
    ):
        logger.error(
            f"Handler for {route_key} returned {type(result).__name__}",
            extra={"route_key": route_key, "request_id": request_id},
        )
        return INTERNAL_ERROR_RESULT
    return result


def _error_code(result: HandlerResult) -> str | None:
    if isinstance(result, Failure):
        return result.envelope.code.value
    return None


def _to_response(result: HandlerResult) -> GatewayResponse:
    try:
        return GatewayResponse.from_body(result.status_code, result.to_body())
    except (TypeError, ValueError) as exc:
        logger.error(f"Response body not serializable: {type(exc).__name__}")
        return GatewayResponse.from_body(
            INTERNAL_ERROR_RESULT.status_code, INTERNAL_ERROR_RESULT.to_body(),
        )
