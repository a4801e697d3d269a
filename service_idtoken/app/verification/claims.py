"""
Issuer and audience checks.
"""

from typing import Collection, List, Optional, Sequence

from shared.errors import AudienceMismatchError, UnknownIssuerError
from .models import ClaimSet


def check_issuer(claims: ClaimSet, issuers: Collection[str]) -> None:
    """Exact, case-sensitive match of ``iss`` against the allow-list."""
    if claims.iss is None or claims.iss not in issuers:
        raise UnknownIssuerError(claims.iss)


def resolve_audiences(audience: Optional[Sequence[str]], default_audience: Sequence[str]) -> List[str]:
    """Caller-supplied audiences win when non-empty."""
    if audience:
        return list(audience)
    return list(default_audience)


def check_audience(claims: ClaimSet, audiences: Sequence[str]) -> None:
    """Require ``aud`` to equal one of the allowed audiences.

    A list-valued ``aud`` passes when any of its entries is allowed.
    """
    aud = claims.aud
    token_audiences = aud if isinstance(aud, list) else [aud]
    if not any(value is not None and value in audiences for value in token_audiences):
        raise AudienceMismatchError(aud)
