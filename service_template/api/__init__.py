"""API Layer - FastAPI routes, error handlers and the envelope writer.

Invariants:
    - Every JSON body leaving the service goes through write_response
"""
