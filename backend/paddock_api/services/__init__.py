"""Services Layer — one service class per collection.

Invariants:
    - Each operation is a single read-modify-write inside the injected AsyncSession
    - Ownership and not-found decisions delegated to core/ownership.py
"""
