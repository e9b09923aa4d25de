"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Paddock is the aggregate root for embedded steps and systems

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from paddock_api.models.user import User  # noqa: F401
from paddock_api.models.paddock import Paddock  # noqa: F401
from paddock_api.models.step import Step  # noqa: F401
from paddock_api.models.system import System  # noqa: F401
