"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies)
    - Validation is per-request and stateless; no shared validator instance

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
