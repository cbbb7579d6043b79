"""Core Layer — pure operation logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the dispatch/HTTP shell
"""
