"""
Decoded token structures.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

# kid -> public key (jose key, JWK dict or PEM)
KeySet = Mapping[str, Any]


class Header(BaseModel):
    """JOSE header of an ID token."""

    model_config = ConfigDict(extra="allow", strict=True)

    alg: Optional[str] = None
    kid: Optional[str] = None
    typ: Optional[str] = None


class ClaimSet(BaseModel):
    """Claims carried by a Google-issued ID token.

    Only ``iss``, ``aud``, ``iat`` and ``exp`` take part in verification. The
    identity claims are exposed for convenience, and anything else the
    provider adds is kept as an extra field. Values are never coerced, so a
    string or float ``iat`` does not decode.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    iss: Optional[str] = None
    aud: Union[str, List[str], None] = None
    iat: Optional[int] = None
    exp: Optional[int] = None

    sub: Optional[str] = None
    azp: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    hd: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    locale: Optional[str] = None
    nonce: Optional[str] = None
    at_hash: Optional[str] = None

    def as_dict(self) -> dict:
        """Claims as they appeared in the payload."""
        return self.model_dump(exclude_unset=True)


@dataclass(frozen=True)
class DecodedToken:
    """Token split into its verified-later parts."""

    header: Header
    claims: ClaimSet
    signed_part: bytes
    signature: bytes
