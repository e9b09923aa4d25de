"""Ownership & 404 Helpers — the two guards every handler passes records through.

Invariants:
    - require_found returns the record unchanged or raises ResourceNotFoundError
    - require_ownership compares identities as strings and returns None on success
    - Neither helper touches the database

Design Decisions:
    - String comparison: owner ids arrive as UUID objects from the ORM and as
      strings from callers; str() on both sides makes the check representation-agnostic
"""

from typing import Any, TypeVar

from paddock_api.core.errors import (
    AuthenticationError, MissingOwnerError, OwnershipError, ResourceNotFoundError,
)

T = TypeVar("T")


def require_found(record: T | None, resource_type: str, resource_id: Any) -> T:
    """Return record if present, raise NotFound otherwise."""
    if record is None:
        raise ResourceNotFoundError(resource_type, str(resource_id))
    return record


def require_ownership(
    caller_id: Any, owner_id: Any, resource_type: str, resource_id: Any,
) -> None:
    """Raise OwnershipError unless caller_id equals owner_id."""
    if owner_id is None or str(caller_id) != str(owner_id):
        raise OwnershipError(resource_type, str(resource_id))


def resolve_owner(
    body_owner: Any,
    caller_id: Any,
    resource_type: str,
    *,
    allow_anonymous: bool,
    required: bool,
) -> Any:
    """Decide the owner of a record being created.

    A signed-in caller owns what they create: a missing body owner defaults to
    them, a different one is rejected. Anonymous callers must name the owner
    themselves when one is required.
    """
    if caller_id is None and not allow_anonymous:
        raise AuthenticationError()
    if caller_id is not None:
        if body_owner is None:
            return caller_id
        if str(body_owner) != str(caller_id):
            raise OwnershipError(resource_type, "new")
        return body_owner
    if body_owner is None and required:
        raise MissingOwnerError(resource_type)
    return body_owner
