"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services translate core results and Python exceptions into typed errors
    - Services never contain operation semantics (those live in core/)

Design Decisions:
    - Functional core, imperative shell: dispatch and harness are thin wrappers
"""
