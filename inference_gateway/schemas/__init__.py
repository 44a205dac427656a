"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate wire SHAPE at the system boundary (types, enum values, priority range)
    - Schemas never duplicate content rules owned by core/enforce_request
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, the aggregate is domain state
"""
