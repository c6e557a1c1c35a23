"""Core Layer - envelope model, result codes and error types.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or main
    - Functions are pure; IO happens behind the ResponseSink protocol
"""
