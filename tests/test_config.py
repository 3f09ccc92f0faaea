"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from config import Config, load_config


ENV_VARS = [
    "HOST", "PORT", "BASE_URL", "PATH_PREFIX", "TRUST_FORWARDED_HEADERS",
    "ATOMIC_KEYS", "LOG_LEVEL", "LOG_FILE", "LOG_JSON",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate from the caller's environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestConfig:
    """Test configuration."""

    def test_defaults(self, clean_env):
        """Defaults reproduce the fixed localhost:8080 service."""
        config = load_config()

        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.base_url == "http://localhost:8080"
        assert config.path_prefix == ""
        assert config.trust_forwarded_headers is False
        assert config.atomic_keys is True
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.log_json is False

    def test_environment_overrides(self, clean_env):
        """Environment variables override defaults case-insensitively."""
        clean_env.setenv("PORT", "9000")
        clean_env.setenv("base_url", "https://sho.rt")
        clean_env.setenv("ATOMIC_KEYS", "0")
        clean_env.setenv("LOG_JSON", "true")

        config = load_config()

        assert config.port == 9000
        assert config.base_url == "https://sho.rt"
        assert config.atomic_keys is False
        assert config.log_json is True

    def test_env_file(self, clean_env, tmp_path):
        """Settings are read from .env in the working directory."""
        (tmp_path / ".env").write_text("PORT=8181\nPATH_PREFIX=/s\nUNRELATED=1\n")

        config = Config()

        assert config.port == 8181
        assert config.path_prefix == "/s"

    def test_invalid_port(self, clean_env):
        """Out of range ports are rejected."""
        with pytest.raises(ValidationError):
            Config(port=0)
