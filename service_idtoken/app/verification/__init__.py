"""
Token verification package.

Checks a compact ID token in a fixed order, stopping at the first failure:

- decoder: Split and decode header, claims and signature.
- signature: Look up the header kid in the key set and verify RS256.
- temporal: iat/exp against now, the max token lifetime and clock skew.
- claims: Issuer and audience allow-lists.
- verifier: `verify_signed_jwt_with_certs` and the `CertsVerifier` entry
  point that resolves certs and audiences first.

Every rejection raises a distinct `TokenValidationError` subclass from
shared.errors so callers can tell why a token was refused.
"""
