"""
Cert source package.

Supplies the provider's public signing keys as a read-only kid -> key
mapping. Sources must hand out complete snapshots; a refresh replaces the
whole mapping rather than mutating it.

- client: Google JWKS endpoint with Cache-Control driven caching and
  stale fallback on fetch failures.
- source: The `CertsSource` contract and a static in-memory source.
"""
