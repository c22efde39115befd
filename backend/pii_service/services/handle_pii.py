"""PII Handlers — placeholder outcomes for the detection and anonymization routes.

Invariants:
    - Every handler returns Failure(NOT_IMPLEMENTED, 501)
    - Request bodies are never accepted, read or echoed
    - Response shape {"error": {"code", "message"}} is the contract real
      implementations must keep

Design Decisions:
    - Stubs replaced wholesale (not patched) once detection/anonymization lands
"""

from pii_service.core.errors import ErrorCode, make_error
from pii_service.core.handler_result import Failure

NOT_IMPLEMENTED_STATUS = 501

DETECT_NOT_IMPLEMENTED = "PII detection is not yet implemented."
ANONYMIZE_NOT_IMPLEMENTED = "PII anonymization is not yet implemented."
DETECT_AND_ANONYMIZE_NOT_IMPLEMENTED = (
    "Combined PII detect-and-anonymize is not yet implemented."
)


def _not_implemented(message: str) -> Failure:
    return Failure(
        make_error(ErrorCode.NOT_IMPLEMENTED, message), NOT_IMPLEMENTED_STATUS,
    )


def handle_pii_detect() -> Failure:
    """POST /v1/pii/detect."""
    return _not_implemented(DETECT_NOT_IMPLEMENTED)


def handle_pii_anonymize() -> Failure:
    """POST /v1/pii/anonymize."""
    return _not_implemented(ANONYMIZE_NOT_IMPLEMENTED)


def handle_pii_detect_and_anonymize() -> Failure:
    """POST /v1/pii/detect-and-anonymize."""
    return _not_implemented(DETECT_AND_ANONYMIZE_NOT_IMPLEMENTED)
