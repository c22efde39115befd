"""Gateway Proxy Route — forwards every local HTTP request through the dispatcher.

Invariants:
    - Method and URL path passed verbatim; body never awaited (zero retention)
    - Status, headers and body returned exactly as dispatch() produced them

Design Decisions:
    - Single catch-all route over one FastAPI route per endpoint: the local server
      behaves byte-for-byte like the deployed function, including 404s
"""

import logging

from fastapi import APIRouter, Request, Response

from pii_service.schemas.gateway import GatewayRequest
from pii_service.schemas.responses import ErrorResponse, HealthResponse
from pii_service.services.dispatch import dispatch

logger = logging.getLogger(__name__)
router = APIRouter(tags=["gateway"])

PROXIED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route(
    "/{full_path:path}",
    methods=PROXIED_METHODS,
    responses={
        200: {"model": HealthResponse, "description": "GET /v1/health"},
        404: {"model": ErrorResponse, "description": "No route matches"},
        500: {"model": ErrorResponse, "description": "Handler failed"},
        501: {"model": ErrorResponse, "description": "PII endpoints (not implemented)"},
    },
)
async def proxy(request: Request) -> Response:
    """Dispatch any method/path exactly as the deployed gateway function would."""
    gateway_request = GatewayRequest(
        method=request.method,
        path=request.url.path,
        request_id=request.headers.get("x-request-id"),
    )
    result = dispatch(gateway_request)
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )
