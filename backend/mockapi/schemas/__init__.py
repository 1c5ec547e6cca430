"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format, never store internals

Design Decisions:
    - Separate from store records: schemas are API contracts (ADR: DDD boundary)
"""
