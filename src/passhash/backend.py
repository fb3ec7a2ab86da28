"""Trusted primitives: secure randomness, PBKDF2 and constant-time comparison."""

from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Protocol, runtime_checkable

from passhash.exceptions import CryptoBackendError
from passhash.formats import DIGEST


@runtime_checkable
class RandomSource(Protocol):
    """Interface for byte generators used to draw salts."""

    def token_bytes(self, n: int) -> bytes:
        """Return *n* random bytes."""
        ...


class SystemRandomSource:
    """OS CSPRNG. The only source that belongs in production."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


def random_bytes(source: RandomSource, n: int) -> bytes:
    try:
        data = source.token_bytes(n)
    except Exception as exc:
        raise CryptoBackendError(f"Random source failed: {exc}") from exc
    if not isinstance(data, bytes) or len(data) != n:
        raise CryptoBackendError(f"Random source returned a bad value (expected {n} bytes)")
    return data


def pbkdf2_sha256(password: str, salt: bytes, iterations: int, key_length: int) -> bytes:
    try:
        return hashlib.pbkdf2_hmac(
            DIGEST, password.encode("utf-8"), salt, iterations, dklen=key_length
        )
    except (ValueError, OverflowError, MemoryError) as exc:
        raise CryptoBackendError(f"PBKDF2 derivation failed: {exc}") from exc


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Compare without early exit. Different lengths are simply unequal."""
    return hmac.compare_digest(a, b)
