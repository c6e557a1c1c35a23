"""Route Modules - one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes build envelopes and hand them to envelope_response
"""
