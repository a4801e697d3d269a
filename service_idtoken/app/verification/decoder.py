"""
Compact token decoding.
"""

import binascii
import re

from jose.utils import base64url_decode
from pydantic import ValidationError

from shared.errors import MalformedTokenError
from .models import ClaimSet, DecodedToken, Header

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]+={0,2}")


def _decode_segment(segment: str, name: str) -> bytes:
    if not _SEGMENT_RE.fullmatch(segment):
        raise MalformedTokenError(f"{name} segment is not base64url", details={"segment": name})
    try:
        return base64url_decode(segment.encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise MalformedTokenError(
            f"{name} segment failed base64url decoding",
            details={"segment": name, "error": str(exc)}
        ) from exc


def decode_token(token: str) -> DecodedToken:
    """Split a compact token and decode its header and claims.

    The signed part is kept exactly as received, since the signature is
    computed over the original segment bytes.
    """
    if not isinstance(token, str):
        raise MalformedTokenError("token must be a string")

    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise MalformedTokenError(
            "token must have three non-empty segments",
            details={"segments": len(segments)}
        )
    header_segment, payload_segment, signature_segment = segments

    header_bytes = _decode_segment(header_segment, "header")
    payload_bytes = _decode_segment(payload_segment, "payload")
    signature = _decode_segment(signature_segment, "signature")

    try:
        header = Header.model_validate_json(header_bytes)
    except ValidationError as exc:
        raise MalformedTokenError("invalid token header", details={"errors": exc.error_count()}) from exc

    try:
        claims = ClaimSet.model_validate_json(payload_bytes)
    except ValidationError as exc:
        raise MalformedTokenError("invalid token payload", details={"errors": exc.error_count()}) from exc

    return DecodedToken(
        header=header,
        claims=claims,
        signed_part=f"{header_segment}.{payload_segment}".encode("ascii"),
        signature=signature,
    )
