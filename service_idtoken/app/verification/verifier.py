"""
ID token verification entry points.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from shared.config import VerifierConfig
from shared.errors import TokenValidationError
from shared.logging import get_logger
from ..certs.client import GoogleCertsClient
from ..certs.source import CertsSource
from .claims import check_audience, check_issuer, resolve_audiences
from .decoder import decode_token
from .models import ClaimSet, KeySet
from .signature import check_signature
from .temporal import Clock, SystemClock, check_temporal_claims

logger = get_logger("idtoken.verifier")


def verify_signed_jwt_with_certs(
    token: str,
    certs: KeySet,
    audiences: Sequence[str],
    config: VerifierConfig,
    clock: Optional[Clock] = None,
) -> ClaimSet:
    """Verify a signed ID token against an already-resolved key set.

    Stages run in a fixed order and the first failure is raised as is:
    decode, signature, issued-at/expiry, issuer, audience. Claim content is
    only looked at once the token is known to be well formed and genuine.
    """
    clock = clock or SystemClock()

    decoded = decode_token(token)
    check_signature(decoded, certs)

    claims = decoded.claims
    check_temporal_claims(claims, config.max_token_lifetime, config.clock_skew, clock)
    check_issuer(claims, config.issuers)
    check_audience(claims, audiences)

    return claims


class TokenVerifier(ABC):
    """Verifies Google-issued OAuth2 ID tokens."""

    @abstractmethod
    async def verify_id_token(self, id_token: str, audience: Optional[Sequence[str]] = None) -> ClaimSet:
        """Return the token's claims, or raise why it was rejected."""


class CertsVerifier(TokenVerifier):
    """Verifies ID tokens locally against the provider's published certs."""

    def __init__(
        self,
        config: Optional[VerifierConfig] = None,
        certs_source: Optional[CertsSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or VerifierConfig()
        self.certs_source = certs_source or GoogleCertsClient(
            self.config.certs_url,
            cache_ttl=self.config.certs_cache_ttl,
            timeout=self.config.certs_timeout,
        )
        self.clock = clock or SystemClock()

    async def verify_id_token(self, id_token: str, audience: Optional[Sequence[str]] = None) -> ClaimSet:
        """Verify an ID token for this application.

        Args:
            id_token: Compact signed token.
            audience: Allowed audiences for this call; the configured default
                audience is used when empty or omitted.

        Raises:
            TokenValidationError: The token was rejected.
            ExternalServiceError: The certs could not be obtained, so the
                token could not be checked.
        """
        certs = await self.certs_source.get_certs()
        audiences = resolve_audiences(audience, self.config.default_audience)

        try:
            claims = verify_signed_jwt_with_certs(id_token, certs, audiences, self.config, self.clock)
        except TokenValidationError as e:
            logger.info("ID token rejected", code=e.code, reason=e.message)
            raise

        logger.debug("ID token verified", iss=claims.iss, sub=claims.sub)
        return claims
