"""Password verification against encoded hashes."""

from __future__ import annotations

import logging
from concurrent.futures import Executor

from passhash.backend import constant_time_equal, pbkdf2_sha256
from passhash.config import PasshashConfig
from passhash.encoding import decode_bytes, kdf_salt, parse_hash
from passhash.formats import HashFormat
from passhash.hasher import ensure_text
from passhash.worker import KdfWorker

log = logging.getLogger(__name__)


class Verifier:
    """Checks plaintext passwords against hashes produced by :class:`Hasher`.

    The hash is parsed and decoded before any key derivation, so malformed
    values fail fast with :class:`MalformedHashError`. The key length used for
    re-derivation is taken from the stored key itself, which lets one code
    path verify both the 32 byte and the 64 byte conventions.
    """

    def __init__(self, config: PasshashConfig | None = None, *, executor: Executor | None = None):
        self._config = config or PasshashConfig()
        self._worker = KdfWorker(
            executor,
            max_workers=self._config.executor_workers if executor is None else None,
        )

    def verify_sync(self, plaintext: str, encoded: str, *, legacy: bool = False) -> bool:
        fmt, iterations, salt, expected = self._prepare(plaintext, encoded, legacy)
        return self._check(plaintext, iterations, salt, expected, fmt)

    async def verify(self, plaintext: str, encoded: str, *, legacy: bool = False) -> bool:
        """Return ``True`` iff *plaintext* matches *encoded*.

        Format errors raise instead of returning ``False``.
        """
        fmt, iterations, salt, expected = self._prepare(plaintext, encoded, legacy)
        return await self._worker.run(self._check, plaintext, iterations, salt, expected, fmt)

    def needs_rehash(self, encoded: str, *, legacy: bool = False) -> bool:
        """Whether *encoded* was made with anything other than the current parameters."""
        parsed = parse_hash(encoded)
        fmt = HashFormat.select(legacy)
        decode_bytes(parsed.salt, fmt)
        key = decode_bytes(parsed.derived_key, fmt)
        if fmt is HashFormat.legacy:
            return True
        current = HashFormat.current
        return parsed.iterations != current.params.iterations or len(key) != current.params.key_length

    def close(self) -> None:
        self._worker.close()

    def __enter__(self) -> Verifier:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @staticmethod
    def _prepare(plaintext: str, encoded: str, legacy: bool) -> tuple[HashFormat, int, bytes, bytes]:
        ensure_text(plaintext)
        parsed = parse_hash(encoded)
        fmt = HashFormat.select(legacy)
        salt = decode_bytes(parsed.salt, fmt)
        expected = decode_bytes(parsed.derived_key, fmt)
        return fmt, parsed.iterations, salt, expected

    @staticmethod
    def _check(plaintext: str, iterations: int, salt: bytes, expected: bytes, fmt: HashFormat) -> bool:
        derived = pbkdf2_sha256(plaintext, kdf_salt(salt, fmt), iterations, len(expected))
        log.debug("Verified against %s hash (%d iterations)", fmt.value, iterations)
        return constant_time_equal(derived, expected)
