"""Pydantic Schemas — request/response envelopes for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Every body is wrapped in its resource key ({"paddock": {...}}, {"step": {...}})

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
