"""Password hashing (PBKDF2-HMAC-SHA256)."""

from __future__ import annotations

import logging
from concurrent.futures import Executor

from passhash.backend import RandomSource, SystemRandomSource, pbkdf2_sha256, random_bytes
from passhash.config import PasshashConfig
from passhash.encoding import encode_bytes, format_hash, kdf_salt
from passhash.exceptions import InvalidInputError
from passhash.formats import HashFormat
from passhash.worker import KdfWorker

log = logging.getLogger(__name__)


def ensure_text(plaintext: str) -> None:
    if not isinstance(plaintext, str):
        raise InvalidInputError("Password invalid: must be a string")
    try:
        plaintext.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError("Password invalid: not encodable as UTF-8") from exc


def check_plaintext(plaintext: str, min_length: int) -> None:
    """Basic safeguard, not a password policy."""
    ensure_text(plaintext)
    if len(plaintext.strip()) < min_length:
        raise InvalidInputError("Password invalid: too short")


class Hasher:
    """Derives encoded hashes from plaintext passwords.

    >>> hasher = Hasher()
    >>> encoded = hasher.hash_sync("correct horse")
    >>> encoded.startswith("pbkdf2_sha256$150000$")
    True

    The result has the form ``pbkdf2_sha256$<iterations>$<salt>$<key>``. The
    current format uses a 16 byte salt, 150000 iterations and a 32 byte key,
    base64 encoded. ``legacy=True`` reproduces the old hex format and should
    only be used by migration code.
    """

    def __init__(
        self,
        config: PasshashConfig | None = None,
        *,
        random_source: RandomSource | None = None,
        executor: Executor | None = None,
    ):
        self._config = config or PasshashConfig()
        self._random = random_source or SystemRandomSource()
        self._worker = KdfWorker(
            executor,
            max_workers=self._config.executor_workers if executor is None else None,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def hash_sync(self, plaintext: str, *, legacy: bool = False) -> str:
        """Hash on the calling thread. Blocks for the whole derivation."""
        fmt, salt = self._prepare(plaintext, legacy)
        return self._derive(plaintext, salt, fmt)

    async def hash(self, plaintext: str, *, legacy: bool = False) -> str:
        """Hash without blocking the event loop; PBKDF2 runs in a worker thread."""
        fmt, salt = self._prepare(plaintext, legacy)
        return await self._worker.run(self._derive, plaintext, salt, fmt)

    def close(self) -> None:
        self._worker.close()

    def __enter__(self) -> Hasher:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _prepare(self, plaintext: str, legacy: bool) -> tuple[HashFormat, bytes]:
        check_plaintext(plaintext, self._config.min_password_length)
        fmt = HashFormat.select(legacy)
        if fmt is HashFormat.legacy:
            log.warning("Creating a new password hash in legacy format")
        return fmt, random_bytes(self._random, fmt.params.salt_length)

    @staticmethod
    def _derive(plaintext: str, salt: bytes, fmt: HashFormat) -> str:
        params = fmt.params
        key = pbkdf2_sha256(plaintext, kdf_salt(salt, fmt), params.iterations, params.key_length)
        log.debug("Derived %s hash (%d iterations)", fmt.value, params.iterations)
        return format_hash(params.iterations, encode_bytes(salt, fmt), encode_bytes(key, fmt))
