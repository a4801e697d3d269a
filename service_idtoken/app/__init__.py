"""
ID token verifier package.

Verifies Google-issued OAuth2 ID tokens locally against the provider's
published signing certs:

- app.verification: Decoding, signature, temporal and claim checks, and
  the verifier entry points that compose them.
- app.certs: Cert sources that supply the key set (JWKS) used to check
  signatures.

Design notes:
- Module import must not perform network calls. The only IO is the cert
  fetch, triggered explicitly through a cert source.
- Use the shared/ utilities for config, logging and errors.
- Verification itself is synchronous and stateless; the cert cache is the
  only shared mutable state.
"""
