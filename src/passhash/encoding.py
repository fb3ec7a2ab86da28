"""Encoded hash grammar: ``algorithm$iterations$salt$key``."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from passhash.exceptions import MalformedHashError
from passhash.formats import ALGORITHM, HashFormat

_SEPARATOR = "$"
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ParsedHash:
    """The four fields of an encoded hash, salt and key still text-encoded."""

    algorithm: str
    iterations: int
    salt: str
    derived_key: str


def encode_bytes(data: bytes, fmt: HashFormat) -> str:
    if fmt.params.encoding == "hex":
        return data.hex()
    return base64.b64encode(data).decode("ascii")


def decode_bytes(text: str, fmt: HashFormat) -> bytes:
    """Strictly decode *text*; raise :class:`MalformedHashError` on bad input."""
    try:
        if fmt.params.encoding == "hex":
            data = binascii.unhexlify(text)
        else:
            data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedHashError(f"cannot decode {fmt.params.encoding} field") from exc
    if not data:
        raise MalformedHashError("empty field")
    return data


def format_hash(iterations: int, salt: str, derived_key: str) -> str:
    return _SEPARATOR.join((ALGORITHM, str(iterations), salt, derived_key))


def parse_hash(encoded: str) -> ParsedHash:
    """Split and validate *encoded* without doing any cryptographic work."""
    if not isinstance(encoded, str):
        raise MalformedHashError("hash must be a string")
    fields = encoded.split(_SEPARATOR)
    if len(fields) != 4:
        raise MalformedHashError(f"expected 4 fields, got {len(fields)}")
    algorithm, iterations, salt, derived_key = fields
    if not all(fields):
        raise MalformedHashError("empty field")
    if algorithm != ALGORITHM:
        raise MalformedHashError(f"unsupported algorithm {algorithm!r}")
    if not _DIGITS.fullmatch(iterations) or int(iterations) <= 0:
        raise MalformedHashError("iterations must be a positive integer")
    return ParsedHash(
        algorithm=algorithm,
        iterations=int(iterations),
        salt=salt,
        derived_key=derived_key,
    )


def kdf_salt(salt: bytes, fmt: HashFormat) -> bytes:
    """Salt as fed to PBKDF2.

    Legacy hashes were derived from the lowercase hex text of the salt, current
    ones from the raw bytes. Changing either breaks existing hashes.
    """
    if fmt.params.hex_salt_input:
        return salt.hex().encode("ascii")
    return salt
