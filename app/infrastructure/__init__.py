"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic from services/
    - All SQLAlchemy exceptions mapped to core/errors.py types before leaving this layer
"""
