"""Hash format variants and their parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ALGORITHM = "pbkdf2_sha256"
DIGEST = "sha256"
SALT_BYTES = 16


@dataclass(frozen=True)
class FormatParams:
    iterations: int
    key_length: int  # bytes
    salt_length: int  # bytes, before encoding
    encoding: str  # "hex" or "base64"
    hex_salt_input: bool  # KDF receives the hex text of the salt instead of raw bytes


CURRENT = FormatParams(
    iterations=150_000,
    key_length=32,
    salt_length=SALT_BYTES,
    encoding="base64",
    hex_salt_input=False,
)

# Only for verifying hashes issued before the parameter upgrade.
LEGACY = FormatParams(
    iterations=100_000,
    key_length=64,
    salt_length=SALT_BYTES,
    encoding="hex",
    hex_salt_input=True,
)


class HashFormat(str, Enum):
    """Encoded hash conventions."""

    legacy = "legacy"
    current = "current"

    @property
    def params(self) -> FormatParams:
        return LEGACY if self is HashFormat.legacy else CURRENT

    @classmethod
    def select(cls, legacy: bool = False) -> HashFormat:
        return cls.legacy if legacy else cls.current
