"""
Cert source contract and a fixed in-memory implementation.
"""

from types import MappingProxyType
from typing import Any, Mapping, Protocol

from ..verification.models import KeySet


class CertsSource(Protocol):
    """Supplies a consistent snapshot of the provider's signing keys."""

    async def get_certs(self) -> KeySet:
        ...


class StaticCertsSource:
    """Cert source backed by a fixed key set."""

    def __init__(self, keys: Mapping[str, Any]):
        self._certs: KeySet = MappingProxyType(dict(keys))

    async def get_certs(self) -> KeySet:
        return self._certs
