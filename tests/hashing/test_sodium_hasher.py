# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use

"""Tests for the sodium password hasher."""

from unittest.mock import patch

import pytest

from hasherkit.hashing import Hasher, MemLimit, OpsLimit, SodiumHasher
from hasherkit.hashing.errors import ConfigurationError, PasswordTooLongError

INTERACTIVE = {
    "opslimit": OpsLimit.INTERACTIVE,
    "memlimit": MemLimit.INTERACTIVE,
}


@pytest.fixture(name="hasher", scope="module")
def hasher_fixture() -> SodiumHasher:
    """Get a sodium hasher with the interactive limits."""
    return SodiumHasher(INTERACTIVE)


class TestSodiumHasher:
    """Test the sodium hasher."""

    def test_is_a_hasher(self, hasher: SodiumHasher) -> None:
        """Test the hasher implements the protocol."""
        assert isinstance(hasher, Hasher)

    def test_verify_round_trip(self, hasher: SodiumHasher) -> None:
        """Test that a computed hash verifies with the same password."""
        password = "test_password_123"  # nosemgrep # nosec
        hashed = hasher.compute(password)

        assert hashed.startswith("$argon2id$")
        assert hasher.verify(password, hashed)
        assert not hasher.verify("wrong_password", hashed)
        assert not hasher.needs_rehash(hashed)

    def test_unicode_and_bytes(self, hasher: SodiumHasher) -> None:
        """Test unicode passwords given as str or bytes."""
        password = "🔐密码test🔐"  # nosemgrep # nosec
        hashed = hasher.compute(password.encode("utf-8"))

        assert hasher.verify(password, hashed)

    def test_hash_uniqueness(self, hasher: SodiumHasher) -> None:
        """Test hashing the same password twice gives different hashes."""
        hash1 = hasher.compute("secret")
        hash2 = hasher.compute("secret")

        assert hash1 != hash2
        assert hasher.verify("secret", hash1)
        assert hasher.verify("secret", hash2)

    def test_too_long_password(self, hasher: SodiumHasher) -> None:
        """Test that passwords over 4065 bytes are rejected."""
        with pytest.raises(PasswordTooLongError):
            hasher.compute(b"x" * 4066)

    def test_malformed_hash(self, hasher: SodiumHasher) -> None:
        """Test malformed hashes."""
        assert not hasher.verify("secret", "not_a_hash")
        assert hasher.needs_rehash("not_a_hash")


def test_defaults_are_moderate() -> None:
    """Test the default limits."""
    hasher = SodiumHasher()
    assert hasher.options.opslimit == OpsLimit.MODERATE
    assert hasher.options.memlimit == MemLimit.MODERATE


def test_needs_rehash_when_strengthened(hasher: SodiumHasher) -> None:
    """Test that stronger limits require rehash of old hashes."""
    hashed = hasher.compute("secret")
    stronger = SodiumHasher(
        {"opslimit": OpsLimit.MODERATE, "memlimit": MemLimit.INTERACTIVE}
    )
    assert stronger.needs_rehash(hashed)
    assert stronger.verify("secret", hashed)


def test_no_prehash() -> None:
    """Test that the raw password reaches the primitive."""
    hasher = SodiumHasher(INTERACTIVE)
    with patch(
        "hasherkit.hashing.sodium.memory_hard_hash", return_value="$argon2id$"
    ) as mock_hash:
        hasher.compute("secret")
    mock_hash.assert_called_once_with(
        "secret", OpsLimit.INTERACTIVE, MemLimit.INTERACTIVE
    )


def test_invalid_option() -> None:
    """Test that a wrongly typed limit is rejected."""
    with pytest.raises(ConfigurationError) as exc_info:
        SodiumHasher({"opslimit": "moderate"})
    assert exc_info.value.key == "opslimit"
