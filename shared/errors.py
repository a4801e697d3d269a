"""
Shared error handling for the ID token verifier.
"""

from typing import Dict, Any, Optional, Sequence, Union
from pydantic import BaseModel
from opentelemetry import trace


class ErrorResponse(BaseModel):
    """Standard error response format."""

    trace_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class IdTokenException(Exception):
    """Base exception for the ID token verifier."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        trace_id = None
        current_span = trace.get_current_span()
        if current_span and current_span.is_recording():
            span_context = current_span.get_span_context()
            if span_context.trace_id != 0:
                trace_id = f"{span_context.trace_id:032x}"

        return ErrorResponse(
            trace_id=trace_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class TokenValidationError(IdTokenException):
    """The token was checked and rejected."""


class MalformedTokenError(TokenValidationError):
    """Token could not be split or decoded."""

    def __init__(self, message: str = "Malformed token", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_TOKEN", message, details)


class KeyNotFoundError(TokenValidationError):
    """Header key id is not in the key set."""

    def __init__(self, kid: Optional[str]):
        self.kid = kid
        super().__init__("KEY_NOT_FOUND", f"public key not found: {kid}", {"kid": kid})


class InvalidSignatureError(TokenValidationError):
    """Signature does not match the signed content."""

    def __init__(self, message: str = "wrong signature", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_SIGNATURE", message, details)


class MissingIssuedAtError(TokenValidationError):

    def __init__(self):
        super().__init__("MISSING_ISSUED_AT", "no issue time in token")


class MissingExpiryError(TokenValidationError):

    def __init__(self):
        super().__init__("MISSING_EXPIRY", "no expiration time in token")


class ExpiryTooFarInFutureError(TokenValidationError):

    def __init__(self, exp: int, latest_allowed: int):
        super().__init__(
            "EXPIRY_TOO_FAR_IN_FUTURE",
            "expiration time too far in future",
            {"exp": exp, "latest_allowed": latest_allowed}
        )


class UsedTooEarlyError(TokenValidationError):

    def __init__(self, now: int, earliest: int):
        super().__init__(
            "USED_TOO_EARLY",
            "token used too early",
            {"now": now, "earliest": earliest}
        )


class UsedTooLateError(TokenValidationError):

    def __init__(self, now: int, latest: int):
        super().__init__(
            "USED_TOO_LATE",
            "token used too late",
            {"now": now, "latest": latest}
        )


class UnknownIssuerError(TokenValidationError):
    """Issuer claim is not in the allow-list."""

    def __init__(self, issuer: Optional[str]):
        self.issuer = issuer
        super().__init__("UNKNOWN_ISSUER", f"wrong issuer: {issuer}", {"issuer": issuer})


class AudienceMismatchError(TokenValidationError):
    """Audience claim matches none of the allowed audiences."""

    def __init__(self, audience: Union[str, Sequence[str], None]):
        self.audience = audience
        super().__init__("AUDIENCE_MISMATCH", f"wrong aud: {audience}", {"audience": audience})


class ExternalServiceError(IdTokenException):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error",
                 details: Optional[Dict[str, Any]] = None, code: str = "EXTERNAL_SERVICE_ERROR"):
        super().__init__(code, f"{service}: {message}", details)


class CertsUnavailableError(ExternalServiceError):
    """Provider signing keys could not be obtained."""

    def __init__(self, message: str = "unable to fetch signing certs", details: Optional[Dict[str, Any]] = None):
        super().__init__("google-certs", message, details, code="CERTS_UNAVAILABLE")
