"""Bearer Token Digests — tokens are stored hashed, compared by digest.

Invariants:
    - hash_token is deterministic: same token, same digest
    - Raw tokens never reach the database
"""

import hashlib


def hash_token(token: str) -> str:
    """SHA-256 hex digest of a bearer token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
