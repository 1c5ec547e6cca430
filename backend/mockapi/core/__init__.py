"""Core Layer: pure domain logic, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Validation functions are pure and deterministic
"""
