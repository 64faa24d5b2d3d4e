"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the system boundary (user input, API responses)
    - Input schemas stay permissive; the controller owns the required-field check

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
