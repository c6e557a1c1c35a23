"""Service Template - minimal FastAPI service with a uniform JSON envelope.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
