"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas check types only; record constraints are enforced by the store

Design Decisions:
    - Separate from core Record: schemas are API contracts, Record is the domain value
"""
