"""
Signature check against the provider key set.
"""

from typing import Any

from jose import jwk
from jose.backends.base import Key
from jose.constants import ALGORITHMS
from jose.exceptions import JWKError

from shared.errors import InvalidSignatureError, KeyNotFoundError
from .models import DecodedToken, KeySet

# Google signs ID tokens with RS256 only.
SIGNING_ALGORITHM = ALGORITHMS.RS256


def construct_key(key_data: Any) -> Key:
    """Build a verification key from a JWK dict, PEM, or an existing key."""
    if isinstance(key_data, Key):
        return key_data
    return jwk.construct(key_data, SIGNING_ALGORITHM)


def check_signature(decoded: DecodedToken, certs: KeySet) -> None:
    """Verify the token signature with the key named by its header."""
    kid = decoded.header.kid
    key_data = certs.get(kid) if kid else None
    if key_data is None:
        raise KeyNotFoundError(kid)

    alg = decoded.header.alg
    if alg is not None and alg != SIGNING_ALGORITHM:
        raise InvalidSignatureError("unsupported signing algorithm", details={"alg": alg})

    try:
        key = construct_key(key_data)
    except (JWKError, ValueError) as exc:
        raise InvalidSignatureError("unusable public key", details={"kid": kid, "error": str(exc)}) from exc

    if not key.verify(decoded.signed_part, decoded.signature):
        raise InvalidSignatureError(details={"kid": kid})
