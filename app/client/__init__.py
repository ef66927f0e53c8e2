"""Client Layer — caller-side access to the Landing API.

Invariants:
    - Clients validate with the same schemas the routes use (schemas/, api/contract.py)
"""
