"""Pydantic Schemas — gateway transfer shapes and documented response bodies.

Invariants:
    - Schemas live at the system boundary (gateway events, HTTP responses)
    - Error codes come from core.errors, never free-form strings

Design Decisions:
    - Separate from core: schemas are wire contracts, core is routing logic
"""
