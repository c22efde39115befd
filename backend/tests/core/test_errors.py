"""Error Vocabulary — tests for error codes and envelope construction.

Tests cover:
    - ErrorCode is the closed set of four codes
    - make_error builds an immutable envelope
    - to_dict emits plain strings for JSON
"""

import dataclasses

import pytest

from pii_service.core.errors import ErrorCode, ErrorEnvelope, make_error


def test_error_codes_are_closed_set():
    assert {c.value for c in ErrorCode} == {
        "NOT_IMPLEMENTED", "INVALID_INPUT", "INTERNAL_ERROR", "NOT_FOUND",
    }


def test_make_error_sets_code_and_message():
    envelope = make_error(ErrorCode.NOT_FOUND, "Route not found.")
    assert envelope.code is ErrorCode.NOT_FOUND
    assert envelope.message == "Route not found."


def test_make_error_accepts_any_message_text():
    envelope = make_error(ErrorCode.INVALID_INPUT, "")
    assert envelope.message == ""


def test_make_error_accepts_code_value_string():
    assert make_error("NOT_IMPLEMENTED", "x").code is ErrorCode.NOT_IMPLEMENTED


def test_make_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        make_error("TEAPOT", "x")


def test_envelope_is_immutable():
    envelope = make_error(ErrorCode.INTERNAL_ERROR, "boom")
    with pytest.raises(dataclasses.FrozenInstanceError):
        envelope.message = "changed"


def test_envelope_to_dict_uses_code_value():
    envelope = ErrorEnvelope(ErrorCode.NOT_IMPLEMENTED, "Not yet.")
    assert envelope.to_dict() == {"code": "NOT_IMPLEMENTED", "message": "Not yet."}
    assert type(envelope.to_dict()["code"]) is str


def test_envelope_coerces_code_string():
    envelope = ErrorEnvelope("INVALID_INPUT", "Bad.")
    assert envelope.code is ErrorCode.INVALID_INPUT
    assert envelope.to_dict() == {"code": "INVALID_INPUT", "message": "Bad."}


def test_envelope_rejects_unknown_code_string():
    with pytest.raises(ValueError):
        ErrorEnvelope("TEAPOT", "x")
