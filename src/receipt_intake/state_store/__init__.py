"""
Fingerprint store collaborator.

The persistent receipt store owns duplicate lookup; this package defines the
interface the intake service awaits, plus an in-memory implementation.
"""

from .fingerprints import FingerprintStore, InMemoryFingerprintStore

__all__ = [
    "FingerprintStore",
    "InMemoryFingerprintStore",
]
