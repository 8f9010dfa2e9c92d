"""Content hashing."""

from __future__ import annotations

import hashlib


def sha256_hex(data: str | bytes) -> str:
    """Return the lowercase hex SHA-256 digest; text is hashed as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()