"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (timestamps and ids are injectable)

Design Decisions:
    - Functional core separated from imperative shell: services load and persist,
      core decides what the new embedded list looks like
"""
