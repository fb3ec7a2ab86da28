"""Random token helpers."""

from __future__ import annotations

import secrets

from passhash.exceptions import InvalidInputError


def generate_hex_token(size: int) -> str:
    """Return *size* random bytes as lowercase hex (``2 * size`` characters)."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidInputError("Token size must be a positive integer")
    return secrets.token_hex(size)
