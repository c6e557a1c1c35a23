"""Result Codes - 11-digit internal result codes and their classification.

Invariants:
    - A well-formed code has exactly 11 decimal digits
    - code // 10^8 is the category and must be 200, 400 or 500
    - Every ResultCode member is well-formed
    - Classification is total: any int yields a category or None, never raises
"""

from enum import IntEnum

MIN_RESULT_CODE = 10_000_000_000
MAX_RESULT_CODE = 99_999_999_999
CATEGORY_DIVISOR = 100_000_000


class StatusCategory(IntEnum):
    """Coarse class encoded in the leading three digits of a result code."""
    SUCCESS = 200
    CLIENT_ERROR = 400
    SERVER_ERROR = 500


class ResultCode(IntEnum):
    """Internal error catalog used by the global error handlers."""
    VALIDATION_FAILED = 40_000_000_001
    RESOURCE_NOT_FOUND = 40_000_000_004
    METHOD_NOT_ALLOWED = 40_000_000_005
    INTERNAL_ERROR = 50_000_000_001
    SERIALIZATION_FAILED = 50_000_000_002


def status_code_category(code: int) -> StatusCategory | None:
    """Category of an 11-digit result code, or None if it is not well-formed."""
    if code < MIN_RESULT_CODE or code > MAX_RESULT_CODE:
        return None
    try:
        return StatusCategory(code // CATEGORY_DIVISOR)
    except ValueError:
        return None


def is_valid_status_code(code: int) -> bool:
    """True iff code is 11 digits long and falls in the 200/400/500 category."""
    return status_code_category(code) is not None


def result_code_for_transport(http_status: int) -> int:
    """Derive an internal code from a transport status with no catalog entry.

    5xx map into the server-error bucket, 4xx into client-error and anything
    below 400 into success: 503 -> 50000000503, 401 -> 40000000401,
    302 -> 20000000302.
    """
    if http_status >= 500:
        category = StatusCategory.SERVER_ERROR
    elif http_status >= 400:
        category = StatusCategory.CLIENT_ERROR
    else:
        category = StatusCategory.SUCCESS
    return int(category) * CATEGORY_DIVISOR + http_status
