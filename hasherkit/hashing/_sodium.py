# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Sodium (libsodium crypto_pwhash_str) memory-hard primitives."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError
from argon2.low_level import Type
from nacl.exceptions import InvalidkeyError
from nacl.pwhash import argon2id

from ._length import to_bytes

# crypto_pwhash_str output shape
SODIUM_PARALLELISM = 1
SODIUM_HASH_LEN = 32
SODIUM_SALT_LEN = 16


def memory_hard_hash(
    password: str | bytes, opslimit: int, memlimit: int
) -> str:
    """Hash a password with sodium's argon2id.

    Parameters
    ----------
    password : str | bytes
        The plain password.
    opslimit : int
        The ops limit.
    memlimit : int
        The memory limit in bytes.

    Returns
    -------
    str
        The encoded hash.
    """
    hashed = argon2id.str(
        to_bytes(password), opslimit=opslimit, memlimit=memlimit
    )
    return hashed.decode("ascii")


def memory_hard_verify(hashed: str, password: str | bytes) -> bool:
    """Verify a password against a sodium hash.

    Parameters
    ----------
    hashed : str
        The stored hash.
    password : str | bytes
        The plain password.

    Returns
    -------
    bool
        True if the password matches, False otherwise.
    """
    try:
        return argon2id.verify(hashed.encode("ascii"), to_bytes(password))
    except (InvalidkeyError, ValueError):
        # mismatch, wrong prefix or a malformed hash
        return False


def memory_hard_needs_rehash(
    hashed: str, opslimit: int, memlimit: int
) -> bool:
    """Check if a sodium hash does not match the given limits.

    PyNaCl does not bind crypto_pwhash_str_needs_rehash, the stored
    parameters are compared using argon2-cffi instead.

    Parameters
    ----------
    hashed : str
        The stored hash.
    opslimit : int
        The wanted ops limit.
    memlimit : int
        The wanted memory limit in bytes.

    Returns
    -------
    bool
        True if the hash needs rehash, False otherwise.
    """
    if not hashed.startswith(argon2id.STRPREFIX.decode("ascii")):
        return True
    checker = PasswordHasher(
        time_cost=opslimit,
        memory_cost=memlimit // 1024,
        parallelism=SODIUM_PARALLELISM,
        hash_len=SODIUM_HASH_LEN,
        salt_len=SODIUM_SALT_LEN,
        type=Type.ID,
    )
    try:
        return checker.check_needs_rehash(hashed)
    except InvalidHashError:
        return True


__all__ = [
    "memory_hard_hash",
    "memory_hard_verify",
    "memory_hard_needs_rehash",
]
