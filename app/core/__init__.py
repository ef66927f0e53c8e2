"""Core Layer — pure domain logic, types, and boundary contracts.

Invariants:
    - Core never imports from shell (api/, infrastructure/, models/)
    - IO is reached only through Protocols in repository_protocols.py
"""
