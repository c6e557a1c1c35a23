"""Response Writer - serializes envelopes onto a response sink.

Invariants:
    - Serialization happens before the first sink write: a payload that
      cannot be serialized raises EnvelopeSerializationError and leaves the
      sink untouched
    - Write order is Content-Type header, status, body
    - BufferedResponseSink rejects a second status or body write
"""

import logging
from typing import Any

from starlette.responses import Response

from service_template.core.envelope import Envelope
from service_template.core.errors import (
    EnvelopeSerializationError, ResponseAlreadyWrittenError,
)
from service_template.core.response_protocols import ResponseSink

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def serialize_envelope(envelope: Envelope[Any]) -> bytes:
    """Envelope -> JSON bytes, mapping pydantic failures to EnvelopeSerializationError."""
    try:
        return envelope.to_json()
    except ValueError as exc:
        # PydanticSerializationError subclasses ValueError
        raise EnvelopeSerializationError(str(exc)) from exc


def write_response(
    sink: ResponseSink, status_code: int, envelope: Envelope[Any],
) -> None:
    """Write envelope as JSON with the given transport status."""
    body = serialize_envelope(envelope)
    sink.set_header("Content-Type", JSON_CONTENT_TYPE)
    sink.set_status(status_code)
    sink.write_body(body)


class BufferedResponseSink:
    """In-memory ResponseSink rendered into a Starlette Response."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code: int | None = None
        self.body: bytes | None = None

    def set_header(self, name: str, value: str) -> None:
        if self.status_code is not None:
            raise ResponseAlreadyWrittenError("headers")
        self.headers[name] = value

    def set_status(self, status_code: int) -> None:
        if self.status_code is not None:
            raise ResponseAlreadyWrittenError("status")
        self.status_code = status_code

    def write_body(self, body: bytes) -> None:
        if self.body is not None:
            raise ResponseAlreadyWrittenError("body")
        if self.status_code is None:
            self.status_code = 200
        self.body = body

    def to_response(self) -> Response:
        return Response(
            content=self.body or b"",
            status_code=self.status_code or 200,
            headers=self.headers,
        )


def envelope_response(status_code: int, envelope: Envelope[Any]) -> Response:
    """Write envelope into a fresh buffered sink and return the framework response."""
    sink = BufferedResponseSink()
    write_response(sink, status_code, envelope)
    logger.debug(
        "Envelope written",
        extra={"status_code": status_code},
    )
    return sink.to_response()
