"""Boundary Protocols - the response sink the envelope writer targets.

Invariants:
    - Writes happen in order: header(s), status, body
    - Each part is written at most once per logical response
"""

from typing import Protocol


class ResponseSink(Protocol):
    """Structural contract for anything a response can be written to."""
    def set_header(self, name: str, value: str) -> None: ...
    def set_status(self, status_code: int) -> None: ...
    def write_body(self, body: bytes) -> None: ...
