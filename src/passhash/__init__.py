"""Passhash: PBKDF2 password hashing with legacy format compatibility."""

from __future__ import annotations

from passhash.config import PasshashConfig
from passhash.exceptions import (
    ConfigError,
    CryptoBackendError,
    InvalidInputError,
    MalformedHashError,
    PasshashError,
)
from passhash.formats import HashFormat
from passhash.hasher import Hasher
from passhash.tokens import generate_hex_token
from passhash.verifier import Verifier

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "CryptoBackendError",
    "HashFormat",
    "Hasher",
    "InvalidInputError",
    "MalformedHashError",
    "PasshashConfig",
    "PasshashError",
    "Verifier",
    "generate_hex_token",
    "hash_password",
    "hash_password_sync",
    "verify_password",
    "verify_password_sync",
]

_hasher: Hasher | None = None
_verifier: Verifier | None = None


def _default_hasher() -> Hasher:
    global _hasher
    if _hasher is None:
        _hasher = Hasher()
    return _hasher


def _default_verifier() -> Verifier:
    global _verifier
    if _verifier is None:
        _verifier = Verifier()
    return _verifier


async def hash_password(plaintext: str, *, legacy: bool = False) -> str:
    """Hash *plaintext* with the default :class:`Hasher`."""
    return await _default_hasher().hash(plaintext, legacy=legacy)


def hash_password_sync(plaintext: str, *, legacy: bool = False) -> str:
    """Blocking variant of :func:`hash_password`."""
    return _default_hasher().hash_sync(plaintext, legacy=legacy)


async def verify_password(plaintext: str, encoded: str, *, legacy: bool = False) -> bool:
    """Check *plaintext* against *encoded* with the default :class:`Verifier`."""
    return await _default_verifier().verify(plaintext, encoded, legacy=legacy)


def verify_password_sync(plaintext: str, encoded: str, *, legacy: bool = False) -> bool:
    """Blocking variant of :func:`verify_password`."""
    return _default_verifier().verify_sync(plaintext, encoded, legacy=legacy)
