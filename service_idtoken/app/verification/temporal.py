"""
Issued-at and expiry checks.
"""

import time
from typing import Protocol

from shared.errors import (
    ExpiryTooFarInFutureError,
    MissingExpiryError,
    MissingIssuedAtError,
    UsedTooEarlyError,
    UsedTooLateError,
)
from .models import ClaimSet


class Clock(Protocol):
    """Source of the current time in seconds since the epoch."""

    def now(self) -> float:
        ...


class SystemClock:
    """Wall clock."""

    def now(self) -> float:
        return time.time()


def check_temporal_claims(claims: ClaimSet, max_token_lifetime: int, clock_skew: int, clock: Clock) -> None:
    """Check ``iat``/``exp`` against now, all in whole seconds.

    Raises:
        MissingIssuedAtError: ``iat`` absent or below 1.
        MissingExpiryError: ``exp`` absent or below 1.
        ExpiryTooFarInFutureError: ``exp`` later than now plus the max lifetime.
        UsedTooEarlyError: now before ``iat - clock_skew``.
        UsedTooLateError: now after ``exp + clock_skew``.
    """
    if claims.iat is None or claims.iat < 1:
        raise MissingIssuedAtError()
    if claims.exp is None or claims.exp < 1:
        raise MissingExpiryError()

    now = int(clock.now())
    latest_allowed = now + max_token_lifetime
    if claims.exp > latest_allowed:
        raise ExpiryTooFarInFutureError(claims.exp, latest_allowed)

    earliest = claims.iat - clock_skew
    latest = claims.exp + clock_skew

    if now < earliest:
        raise UsedTooEarlyError(now, earliest)
    if now > latest:
        raise UsedTooLateError(now, latest)
