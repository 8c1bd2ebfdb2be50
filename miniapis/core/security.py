"""Security helpers (hashing and verification)."""

from __future__ import annotations

import base64
import hashlib
import secrets


def hash_reset_password(password: str) -> str:
    """SHA-256 digest of the password, base64 encoded (unsalted)."""
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_reset_password(password: str | None, stored_hash: str | None) -> bool:
    if not isinstance(password, str) or not stored_hash:
        return False
    return secrets.compare_digest(hash_reset_password(password), stored_hash)
