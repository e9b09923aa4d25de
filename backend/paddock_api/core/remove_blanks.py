"""Blank-Field Stripping — drops empty strings from request bodies before validation.

Invariants:
    - Keys whose value is "" or whitespace-only are removed, at any nesting depth
    - Non-string values (including None, 0, False, []) are kept
    - The input mapping is never mutated

Design Decisions:
    - Applied to update payloads only: a blank title in a PATCH means "leave as is",
      a blank title in a POST is a validation failure
"""

from typing import Any


def remove_blank_fields(body: Any) -> Any:
    """Return a copy of body with blank string fields removed."""
    if isinstance(body, dict):
        return {
            key: remove_blank_fields(value)
            for key, value in body.items()
            if not (isinstance(value, str) and not value.strip())
        }
    if isinstance(body, list):
        return [remove_blank_fields(item) for item in body]
    return body
