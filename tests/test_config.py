"""Tests for configuration and token helpers."""

import pytest

from passhash import ConfigError, InvalidInputError, PasshashConfig, generate_hex_token


class TestConfig:
    def test_defaults(self):
        cfg = PasshashConfig()
        assert cfg.min_password_length == 6
        assert cfg.executor_workers is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PASSHASH_MIN_PASSWORD_LENGTH", "8")
        monkeypatch.setenv("PASSHASH_EXECUTOR_WORKERS", "4")
        cfg = PasshashConfig.from_env()
        assert cfg.min_password_length == 8
        assert cfg.executor_workers == 4

    def test_from_env_empty(self, monkeypatch):
        monkeypatch.delenv("PASSHASH_MIN_PASSWORD_LENGTH", raising=False)
        monkeypatch.setenv("PASSHASH_EXECUTOR_WORKERS", "")
        assert PasshashConfig.from_env() == PasshashConfig()

    @pytest.mark.parametrize("value", ["zero", "0", "-1"])
    def test_from_env_invalid(self, monkeypatch, value: str):
        monkeypatch.setenv("PASSHASH_MIN_PASSWORD_LENGTH", value)
        with pytest.raises(ConfigError):
            PasshashConfig.from_env()


class TestTokens:
    def test_hex_token(self):
        token = generate_hex_token(16)
        assert len(token) == 32
        int(token, 16)
        assert token == token.lower()

    def test_tokens_differ(self):
        assert generate_hex_token(8) != generate_hex_token(8)

    @pytest.mark.parametrize("size", [0, -3, True, 1.5])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidInputError):
            generate_hex_token(size)
