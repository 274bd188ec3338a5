"""
Duplicate-fingerprint store interface.

The persistent receipt store owns the index of accepted fingerprints; the
intake core only talks to it through this interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class FingerprintStore(ABC):
    """Lookup and registration of receipt fingerprints."""

    @abstractmethod
    async def contains(self, fingerprint: str) -> bool:
        """Check if a receipt with this fingerprint was already accepted."""
        pass

    @abstractmethod
    async def add(self, fingerprint: str) -> None:
        """Register the fingerprint of an accepted receipt."""
        pass


class InMemoryFingerprintStore(FingerprintStore):
    """Set-backed store for tests and single-process embedding."""

    def __init__(self, fingerprints: Iterable[str] = ()):
        self._fingerprints: set[str] = set(fingerprints)

    def __len__(self) -> int:
        return len(self._fingerprints)

    async def contains(self, fingerprint: str) -> bool:
        return fingerprint in self._fingerprints

    async def add(self, fingerprint: str) -> None:
        self._fingerprints.add(fingerprint)
