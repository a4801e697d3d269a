"""
Shared utilities for the ID token verifier.

This package aggregates the ambient building blocks used by the verifier
service package:

- config: Verifier configuration via pydantic-settings
- logging: Structured logging with trace correlation
- errors: Canonical error types and responses
- test_helpers: Key and token factories for tests

Do not import from service packages into shared/.
"""
