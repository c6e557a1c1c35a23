"""Error Hierarchy - typed, categorized exceptions rendered as error envelopes.

Invariants:
    - Every error has an 11-digit result code, a category, a severity and an
      http_status
    - to_envelope() never includes internal details (tracebacks, reprs of
      offending payloads)
    - 400-level errors are client faults; 500-level errors are critical
"""

from enum import Enum
from typing import Any

from service_template.core.envelope import Envelope, error
from service_template.core.status_codes import ResultCode


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SERIALIZATION = "serialization"
    INTERNAL = "internal"


class ServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: int,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = int(code)
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.data = data

    def to_envelope(self) -> Envelope[Any]:
        """Convert to the standard error envelope."""
        return error(self.code, self.message, self.data)


# ─── Response Errors (500-level) ────────────────────────────────

class EnvelopeSerializationError(ServiceError):
    """Envelope payload cannot be converted to JSON."""
    def __init__(self, reason: str):
        super().__init__(
            "Response payload could not be serialized",
            ResultCode.SERIALIZATION_FAILED, ErrorCategory.SERIALIZATION,
            ErrorSeverity.CRITICAL, 500,
        )
        self.reason = reason


class ResponseAlreadyWrittenError(ServiceError):
    """A write-once part of a response was written twice."""
    def __init__(self, part: str):
        super().__init__(
            f"Response {part} already written",
            ResultCode.INTERNAL_ERROR, ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
        self.part = part
