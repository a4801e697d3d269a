"""
Shared configuration management for the ID token verifier.
"""

from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


GOOGLE_ISSUERS = [
    "accounts.google.com",
    "https://accounts.google.com",
]

GOOGLE_CERTS_URL = "https://www.googleapis.com/oauth2/v3/certs"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="IDTOKEN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    log_level: str = Field(default="info")


class VerifierConfig(BaseConfig):
    """Trust policy and cert source settings for ID token verification."""

    # Seconds
    max_token_lifetime: int = Field(default=86400, ge=0)
    clock_skew: int = Field(default=300, ge=0)

    issuers: List[str] = Field(default_factory=lambda: list(GOOGLE_ISSUERS))
    default_audience: List[str] = Field(default_factory=list)

    # Cert source
    certs_url: str = Field(default=GOOGLE_CERTS_URL)
    certs_cache_ttl: int = Field(default=3600, ge=0)
    certs_timeout: float = Field(default=10.0, gt=0)

    @field_validator("issuers")
    @classmethod
    def _issuers_not_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one issuer must be allowed")
        return value


def get_config(**overrides: Any) -> VerifierConfig:
    """Get verifier configuration, environment first, then explicit overrides."""
    return VerifierConfig(**overrides)
