"""Cloud Function Entry Point — tests for event-in, proxy-response-out behavior.

Tests cover:
    - The documented routes through a raw gateway event
    - Unknown routes and malformed events → 404 envelope
    - Response is always a proxy dict with JSON content type
"""

import json

from pii_service.api.lambda_handler import handler


def _event(method, path):
    return {"httpMethod": method, "path": path, "requestContext": {"requestId": "t-1"}}


def test_health_event():
    res = handler(_event("GET", "/v1/health"), None)
    assert res == {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": '{"status":"ok","version":"v1"}',
    }


def test_detect_event():
    res = handler(_event("POST", "/v1/pii/detect"), None)
    assert res["statusCode"] == 501
    assert json.loads(res["body"])["error"]["code"] == "NOT_IMPLEMENTED"


def test_http_api_v2_event():
    res = handler({
        "rawPath": "/v1/pii/anonymize",
        "requestContext": {"http": {"method": "POST", "path": "/v1/pii/anonymize"}},
    })
    assert res["statusCode"] == 501


def test_unknown_route_event():
    res = handler(_event("GET", "/unknown"), None)
    assert res["statusCode"] == 404
    assert res["body"] == '{"error":{"code":"NOT_FOUND","message":"Route not found."}}'


def test_empty_event_returns_404():
    res = handler({}, None)
    assert res["statusCode"] == 404
    assert res["headers"]["Content-Type"] == "application/json"


def test_body_is_not_echoed():
    event = _event("POST", "/v1/pii/detect-and-anonymize")
    event["body"] = '{"text": "SSN 123-45-6789"}'
    res = handler(event, None)
    assert "123-45-6789" not in res["body"]
