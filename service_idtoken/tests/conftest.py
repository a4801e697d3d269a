"""
Shared fixtures for verifier tests.
"""

import pytest

from shared.config import VerifierConfig
from shared.test_helpers import FIXED_NOW, FixedClock, MockTokenGenerator, generate_signing_key


@pytest.fixture(scope="session")
def signing_key():
    """Key registered under kid k1."""
    return generate_signing_key("k1")


@pytest.fixture(scope="session")
def other_signing_key():
    """Key the provider does not vouch for under k1."""
    return generate_signing_key("k2")


@pytest.fixture
def certs(signing_key):
    """Key set holding k1 as a PEM public key."""
    return {"k1": signing_key.public_pem}


@pytest.fixture
def token_generator(signing_key):
    return MockTokenGenerator(signing_key)


@pytest.fixture
def clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture
def config():
    return VerifierConfig(default_audience=["app1"])
