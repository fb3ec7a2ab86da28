"""Passhash exceptions."""


class PasshashError(Exception):
    """Base exception for all passhash errors."""


class InvalidInputError(PasshashError):
    """Raised when a plaintext password fails the basic policy check."""


class MalformedHashError(PasshashError):
    """Raised when an encoded hash does not follow the expected format."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid password format: {reason}")


class CryptoBackendError(PasshashError):
    """Raised when the random source or the key derivation function fails."""


class ConfigError(PasshashError):
    """Raised on invalid configuration."""
