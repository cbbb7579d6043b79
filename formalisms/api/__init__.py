"""API Layer — FastAPI routes and error handlers for cross-language harnesses.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to services (dispatch, conformance runner)
"""
