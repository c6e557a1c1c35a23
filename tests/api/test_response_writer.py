"""Response Writer - tests for write order, failure handling and buffering.

Tests cover:
    - header, status, body written in that order
    - unserializable payload raises before any sink write
    - BufferedResponseSink is write-once and renders a Response
    - envelope_response sets Content-Type and status independently of code
"""

import pytest

from service_template.api.response_writer import (
    BufferedResponseSink, envelope_response, serialize_envelope, write_response,
)
from service_template.core.envelope import Envelope, error, success
from service_template.core.errors import (
    EnvelopeSerializationError, ResponseAlreadyWrittenError,
)


class RecordingSink:
    def __init__(self):
        self.calls = []

    def set_header(self, name, value):
        self.calls.append(("header", name, value))

    def set_status(self, status_code):
        self.calls.append(("status", status_code))

    def write_body(self, body):
        self.calls.append(("body", body))


def test_write_order_is_header_status_body():
    sink = RecordingSink()
    write_response(sink, 200, success({"status": "healthy", "version": "1.0.0"}))
    assert sink.calls == [
        ("header", "Content-Type", "application/json"),
        ("status", 200),
        ("body", b'{"code":200,"msg":"Success","data":{"status":"healthy","version":"1.0.0"}}'),
    ]


def test_unserializable_payload_leaves_sink_untouched():
    sink = RecordingSink()
    with pytest.raises(EnvelopeSerializationError):
        write_response(sink, 200, success({"value": object()}))
    assert sink.calls == []


def test_serialize_envelope_chains_cause():
    with pytest.raises(EnvelopeSerializationError) as exc_info:
        serialize_envelope(success(object()))
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert exc_info.value.reason


def test_transport_status_is_independent_of_code():
    sink = BufferedResponseSink()
    write_response(sink, 200, error(40_000_000_001, "not found"))
    assert sink.status_code == 200
    assert sink.body == b'{"code":40000000001,"msg":"not found"}'


def test_buffered_sink_rejects_second_status():
    sink = BufferedResponseSink()
    sink.set_status(200)
    with pytest.raises(ResponseAlreadyWrittenError):
        sink.set_status(500)


def test_buffered_sink_rejects_header_after_status():
    sink = BufferedResponseSink()
    sink.set_status(200)
    with pytest.raises(ResponseAlreadyWrittenError):
        sink.set_header("X-Late", "1")


def test_buffered_sink_rejects_second_body():
    sink = BufferedResponseSink()
    write_response(sink, 201, success({"id": 1}))
    with pytest.raises(ResponseAlreadyWrittenError):
        sink.write_body(b"{}")


def test_buffered_sink_body_implies_ok_status():
    sink = BufferedResponseSink()
    sink.write_body(b"{}")
    assert sink.status_code == 200


def test_envelope_response_renders_framework_response():
    response = envelope_response(404, error(40_000_000_004, "Not Found"))
    assert response.status_code == 404
    assert response.headers["content-type"] == "application/json"
    assert response.body == b'{"code":40000000004,"msg":"Not Found"}'


def test_envelope_response_round_trip():
    original = success({"nested": {"list": [1, "two", None]}})
    response = envelope_response(200, original)
    restored = Envelope.from_json(response.body)
    assert restored.code == original.code
    assert restored.message == original.message
    assert restored.data == original.data
