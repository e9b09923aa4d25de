"""Infrastructure Layer — database session management and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to PaddockError subclasses
"""
