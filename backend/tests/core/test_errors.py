"""Error hierarchy — status codes and REST envelope shape."""

from paddock_api.core.errors import (
    AuthenticationError,
    ConcurrencyError,
    DatabaseError,
    ErrorCategory,
    MissingOwnerError,
    OwnershipError,
    ResourceNotFoundError,
    UnknownOwnerError,
)
from paddock_api.core.tokens import hash_token


def test_http_status_per_error():
    assert ResourceNotFoundError("Paddock", "1").http_status == 404
    assert OwnershipError("Paddock", "1").http_status == 403
    assert AuthenticationError().http_status == 401
    assert MissingOwnerError("Paddock").http_status == 400
    assert UnknownOwnerError("x").http_status == 400
    assert ConcurrencyError("stale").http_status == 409
    assert DatabaseError("boom", "commit").http_status == 503


def test_to_response_envelope():
    body = ResourceNotFoundError("Paddock", "abc").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert error["message"] == "Paddock 'abc' not found"
    assert error["context"] == {"resource_type": "Paddock", "resource_id": "abc"}
    assert "timestamp" in error


def test_hash_token_is_deterministic_hex():
    digest = hash_token("secret")
    assert digest == hash_token("secret")
    assert digest != hash_token("other")
    assert len(digest) == 64
