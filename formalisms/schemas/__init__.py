"""Pydantic Schemas — request/response validation for the HTTP and harness boundary.

Invariants:
    - Schemas validate at system boundary (HTTP bodies, caller-supplied cases)
    - Domain enums from core/ used for module and outcome fields

Design Decisions:
    - Separate from core: schemas are API contracts, core functions take plain values
"""
