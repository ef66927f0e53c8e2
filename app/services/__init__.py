"""Services Layer — use-case orchestration between API routes and repositories.

Invariants:
    - Services receive their repositories by injection (no module globals)
    - Services raise core/errors.py types; routes never build error bodies

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
