"""Paddock API Package — owner-scoped paddocks with embedded steps and systems.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
