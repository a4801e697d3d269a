"""
Unit tests for verifier configuration.
"""

import pytest
from pydantic import ValidationError

from shared.config import GOOGLE_CERTS_URL, GOOGLE_ISSUERS, VerifierConfig, get_config


class TestVerifierConfig:
    """Test cases for VerifierConfig."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch, tmp_path):
        """Keep the host environment and any .env file out of these tests."""
        monkeypatch.chdir(tmp_path)
        for name in ("MAX_TOKEN_LIFETIME", "CLOCK_SKEW", "ISSUERS", "DEFAULT_AUDIENCE",
                     "CERTS_URL", "CERTS_CACHE_TTL", "CERTS_TIMEOUT", "LOG_LEVEL"):
            monkeypatch.delenv(f"IDTOKEN_{name}", raising=False)

    def test_defaults(self):
        config = VerifierConfig()

        assert config.max_token_lifetime == 86400
        assert config.clock_skew == 300
        assert config.issuers == GOOGLE_ISSUERS
        assert config.default_audience == []
        assert config.certs_url == GOOGLE_CERTS_URL
        assert config.certs_cache_ttl == 3600
        assert config.certs_timeout == 10.0
        assert config.log_level == "info"

    def test_default_issuers_not_shared(self):
        config = VerifierConfig()

        assert config.issuers is not GOOGLE_ISSUERS

    def test_explicit_values(self):
        config = VerifierConfig(max_token_lifetime=3600, clock_skew=0, default_audience=["app1", "app2"])

        assert config.max_token_lifetime == 3600
        assert config.clock_skew == 0
        assert config.default_audience == ["app1", "app2"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("IDTOKEN_CLOCK_SKEW", "60")
        monkeypatch.setenv("IDTOKEN_DEFAULT_AUDIENCE", '["app1"]')
        monkeypatch.setenv("IDTOKEN_ISSUERS", '["https://issuer.example.com"]')

        config = get_config()

        assert config.clock_skew == 60
        assert config.default_audience == ["app1"]
        assert config.issuers == ["https://issuer.example.com"]

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("IDTOKEN_CLOCK_SKEW", "60")

        assert get_config(clock_skew=5).clock_skew == 5

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("IDTOKEN_MAX_TOKEN_LIFETIME=7200\n")

        assert VerifierConfig().max_token_lifetime == 7200

    @pytest.mark.parametrize("field", ["max_token_lifetime", "clock_skew", "certs_cache_ttl"])
    def test_negative_durations_rejected(self, field):
        with pytest.raises(ValidationError):
            VerifierConfig(**{field: -1})

    def test_empty_issuers_rejected(self):
        with pytest.raises(ValidationError):
            VerifierConfig(issuers=[])

    def test_frozen(self):
        config = VerifierConfig()

        with pytest.raises(ValidationError):
            config.clock_skew = 0
