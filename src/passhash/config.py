"""Passhash configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, ValidationError

from passhash.exceptions import ConfigError

_ENV_PREFIX = "PASSHASH_"


class PasshashConfig(BaseModel):
    """Runtime knobs for hashers and verifiers.

    Cryptographic parameters are deliberately absent; they belong to
    :class:`passhash.formats.HashFormat`.
    """

    min_password_length: int = Field(default=6, ge=1)
    executor_workers: int | None = Field(default=None, ge=1)

    @classmethod
    def from_env(cls) -> PasshashConfig:
        """Build a config from ``PASSHASH_*`` environment variables."""
        values: dict[str, str] = {}
        for field in cls.model_fields:
            raw = os.environ.get(f"{_ENV_PREFIX}{field.upper()}", "").strip()
            if raw:
                values[field] = raw
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid passhash environment configuration: {exc}") from exc
