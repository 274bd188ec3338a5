"""Tests for the fingerprint store."""

import asyncio

import pytest

from receipt_intake.state_store import FingerprintStore, InMemoryFingerprintStore


class TestInMemoryFingerprintStore:
    """Tests for the set-backed store."""

    def test_add_and_contains(self):
        """Added fingerprints are found."""
        store = InMemoryFingerprintStore()

        assert asyncio.run(store.contains("a" * 64)) is False
        asyncio.run(store.add("a" * 64))
        assert asyncio.run(store.contains("a" * 64)) is True

    def test_add_is_idempotent(self):
        """Adding the same fingerprint twice stores it once."""
        store = InMemoryFingerprintStore(["a" * 64])
        asyncio.run(store.add("a" * 64))

        assert len(store) == 1

    def test_interface_is_abstract(self):
        """The base store cannot be instantiated."""
        with pytest.raises(TypeError):
            FingerprintStore()
