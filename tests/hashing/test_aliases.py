# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tests for the algorithm and sodium limit aliases."""

import pytest
from nacl.pwhash import argon2id

from hasherkit.hashing._aliases import (
    ALGORITHM_ALIASES,
    MEMLIMIT_ALIASES,
    OPSLIMIT_ALIASES,
    HashAlgorithm,
    MemLimit,
    OpsLimit,
    resolve_algorithm,
    resolve_memlimit,
    resolve_opslimit,
)
from hasherkit.hashing.errors import (
    UnsupportedAlgorithmError,
    UnsupportedTuningError,
)


def test_algorithm_aliases() -> None:
    """Test the algorithm aliases."""
    assert resolve_algorithm("default") is HashAlgorithm.BCRYPT
    assert resolve_algorithm(None) is HashAlgorithm.BCRYPT
    assert resolve_algorithm("bcrypt") is HashAlgorithm.BCRYPT
    assert resolve_algorithm("argon2i") is HashAlgorithm.ARGON2I
    assert resolve_algorithm("argon2id") is HashAlgorithm.ARGON2ID


def test_sodium_limits_match_libsodium() -> None:
    """Test the sodium limits are libsodium's constants."""
    assert OpsLimit.INTERACTIVE == argon2id.OPSLIMIT_INTERACTIVE
    assert OpsLimit.MODERATE == argon2id.OPSLIMIT_MODERATE
    assert OpsLimit.SENSITIVE == argon2id.OPSLIMIT_SENSITIVE
    assert MemLimit.INTERACTIVE == argon2id.MEMLIMIT_INTERACTIVE
    assert MemLimit.MODERATE == argon2id.MEMLIMIT_MODERATE
    assert MemLimit.SENSITIVE == argon2id.MEMLIMIT_SENSITIVE


def test_memlimit_aliases_are_memory_limits() -> None:
    """Test that memlimit aliases do not resolve to ops limits."""
    for name in ("interactive", "moderate", "sensitive"):
        assert resolve_memlimit(name) == MEMLIMIT_ALIASES[name]
        assert resolve_memlimit(name) != OPSLIMIT_ALIASES[name]
    assert resolve_opslimit(None) is OpsLimit.MODERATE
    assert resolve_memlimit(None) is MemLimit.MODERATE


@pytest.mark.parametrize("name", ["unknown", "ARGON2ID", "", "moderate"])
def test_unknown_algorithm(name: str) -> None:
    """Test that unknown algorithm aliases are rejected."""
    with pytest.raises(UnsupportedAlgorithmError) as exc_info:
        resolve_algorithm(name)
    assert exc_info.value.name == name


def test_unknown_sodium_limits() -> None:
    """Test that unknown sodium aliases are rejected."""
    with pytest.raises(UnsupportedTuningError) as exc_info:
        resolve_opslimit("bcrypt")
    assert exc_info.value.option == "opslimit"
    assert exc_info.value.name == "bcrypt"
    with pytest.raises(UnsupportedTuningError) as exc_info:
        resolve_memlimit("huge")
    assert exc_info.value.option == "memlimit"


def test_non_string_alias() -> None:
    """Test that non string aliases are rejected."""
    with pytest.raises(UnsupportedAlgorithmError):
        resolve_algorithm(2)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedTuningError):
        resolve_opslimit(["moderate"])  # type: ignore[arg-type]


def test_alias_tables_are_read_only() -> None:
    """Test that the alias tables cannot be modified."""
    with pytest.raises(TypeError):
        ALGORITHM_ALIASES["md5"] = HashAlgorithm.BCRYPT  # type: ignore
