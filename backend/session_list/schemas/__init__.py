"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)

Design Decisions:
    - Separate from models and core dataclasses: schemas are API contracts
"""
