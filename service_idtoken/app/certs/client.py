"""
Google federated sign-on certs client.
"""

import asyncio
import re
import time
from types import MappingProxyType
from typing import Dict, Optional, Tuple

import httpx
from jose import jwk
from jose.backends.base import Key
from jose.constants import ALGORITHMS
from jose.exceptions import JWKError

from shared.config import GOOGLE_CERTS_URL
from shared.errors import CertsUnavailableError
from shared.logging import get_logger
from ..verification.models import KeySet

_MAX_AGE_RE = re.compile(r"max-age=(\d+)")


class GoogleCertsClient:
    """Fetches and caches the provider's JWKS as a kid -> key snapshot."""

    def __init__(
        self,
        certs_url: str = GOOGLE_CERTS_URL,
        cache_ttl: int = 3600,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.certs_url = certs_url
        self.cache_ttl = cache_ttl
        self.logger = get_logger("idtoken.certs")

        self._certs: Optional[KeySet] = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def _is_fresh(self) -> bool:
        return self._certs is not None and time.time() < self._expires_at

    async def get_certs(self) -> KeySet:
        """Return the current key set, refreshing it once expired.

        A failed refresh falls back to the previous snapshot when there is
        one; otherwise CertsUnavailableError is raised.
        """
        if self._is_fresh():
            return self._certs

        async with self._lock:
            if self._is_fresh():
                return self._certs

            try:
                certs, max_age = await self._fetch_certs()
            except CertsUnavailableError as e:
                self.logger.error("Failed to fetch certs", error=e.message)
                if self._certs is not None:
                    self.logger.warning("Using stale certs due to fetch failure")
                    return self._certs
                raise

            self._certs = certs
            self._expires_at = time.time() + max_age
            self.logger.info("Certs refreshed", keys_count=len(certs), max_age=max_age)
            return certs

    async def _fetch_certs(self) -> Tuple[KeySet, int]:
        try:
            response = await self._client.get(self.certs_url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise CertsUnavailableError(str(exc), details={"url": self.certs_url}) from exc
        except ValueError as exc:
            raise CertsUnavailableError("certs response is not JSON", details={"url": self.certs_url}) from exc

        keys = payload.get("keys") if isinstance(payload, dict) else None
        if not isinstance(keys, list):
            raise CertsUnavailableError("certs response missing 'keys' array", details={"url": self.certs_url})

        return self._build_key_set(keys), self._max_age(response)

    def _build_key_set(self, keys: list) -> KeySet:
        certs: Dict[str, Key] = {}
        for key_data in keys:
            kid = key_data.get("kid") if isinstance(key_data, dict) else None
            if not isinstance(kid, str) or not kid:
                self.logger.warning("Skipping cert without kid")
                continue
            if key_data.get("alg", ALGORITHMS.RS256) != ALGORITHMS.RS256:
                self.logger.warning("Skipping cert with unsupported alg", kid=kid, alg=key_data.get("alg"))
                continue
            try:
                certs[kid] = jwk.construct(key_data, ALGORITHMS.RS256)
            except (JWKError, ValueError) as exc:
                self.logger.warning("Skipping unusable cert", kid=kid, error=str(exc))

        return MappingProxyType(certs)

    def _max_age(self, response: httpx.Response) -> int:
        match = _MAX_AGE_RE.search(response.headers.get("cache-control", ""))
        if match:
            return int(match.group(1))
        return self.cache_ttl

    def clear_cache(self):
        """Drop the cached key set."""
        self._certs = None
        self._expires_at = 0.0
        self.logger.info("Certs cache cleared")
