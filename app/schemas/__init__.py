"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - The same schemas are imported by the route and by the caller-side client

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
