"""Response Envelope - the uniform {code, msg, data} payload shape.

Invariants:
    - Envelopes are frozen after construction; the freeze is shallow, data
      holds the caller's payload by reference and is read at serialization
    - code and msg are always serialized; data only when the payload is present
    - data is absent when it is None or an empty string/container; this is
      decided on the top-level field only, nested nulls and empties inside a
      present payload are serialized as-is
    - An empty top-level list or dict is indistinguishable from no data on the
      wire: success([]) round-trips to data=None
    - success() always yields code 200 and msg "Success"
    - error() stores its arguments verbatim; no validation of the code

Design Decisions:
    - Generic pydantic model: Envelope[HealthStatus] documents the payload in
      OpenAPI while Envelope (unparametrized) accepts any serializable value
    - Python attribute is `message`, wire key is `msg`
"""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")

SUCCESS_CODE = 200
SUCCESS_MESSAGE = "Success"

_EMPTY_PAYLOAD_TYPES = (Mapping, list, tuple, set, frozenset, str, bytes)


class Envelope(BaseModel, Generic[T]):
    """Standard response wrapper shared by every endpoint."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str = Field(
        serialization_alias="msg",
        validation_alias=AliasChoices("msg", "message"),
    )
    data: T | None = None

    @property
    def has_data(self) -> bool:
        return not is_absent(self.data)

    def to_json(self) -> bytes:
        """Compact JSON body. Raises ValueError if the payload is not serializable."""
        exclude = None if self.has_data else {"data"}
        return self.model_dump_json(by_alias=True, exclude=exclude).encode()

    @classmethod
    def from_json(cls, body: bytes | str) -> "Envelope[Any]":
        return cls.model_validate_json(body)


def is_absent(data: Any) -> bool:
    """True for payloads that are left out of the serialized envelope."""
    if data is None:
        return True
    return isinstance(data, _EMPTY_PAYLOAD_TYPES) and len(data) == 0


def success(data: Any = None) -> Envelope[Any]:
    """Success envelope around an optional payload."""
    return Envelope(code=SUCCESS_CODE, message=SUCCESS_MESSAGE, data=data)


def error(code: int, message: str, data: Any = None) -> Envelope[Any]:
    """Error envelope; validate code with is_valid_status_code beforehand if needed."""
    return Envelope(code=code, message=message, data=data)
