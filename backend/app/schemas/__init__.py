"""Pydantic Schemas — validation for data crossing the client boundary.

Invariants:
    - Schemas validate at system boundary (form input, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
