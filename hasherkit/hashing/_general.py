# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""General password hashing primitives (bcrypt, argon2i and argon2id)."""

import re

import bcrypt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type

from ._aliases import HashAlgorithm
from ._length import to_bytes
from ._options import StandardOptions

ARGON2_PREFIX = "$argon2"
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
_BCRYPT_RE = re.compile(r"^\$2[aby]\$(\d{2})\$[./A-Za-z0-9]{53}$")

_ARGON2_TYPES = {
    HashAlgorithm.ARGON2I: Type.I,
    HashAlgorithm.ARGON2ID: Type.ID,
}


def _argon2(
    algorithm: HashAlgorithm, options: StandardOptions
) -> PasswordHasher:
    return PasswordHasher(
        time_cost=options.time_cost,
        memory_cost=options.memory_cost,
        parallelism=options.threads,
        type=_ARGON2_TYPES[algorithm],
    )


def general_hash(
    password: str | bytes,
    algorithm: HashAlgorithm,
    options: StandardOptions,
) -> str:
    """Hash a password with the given algorithm.

    Parameters
    ----------
    password : str | bytes
        The (already transformed) password.
    algorithm : HashAlgorithm
        The algorithm to use.
    options : StandardOptions
        The tuning options, memory_cost/time_cost/threads for argon2,
        cost for bcrypt.

    Returns
    -------
    str
        The encoded hash.
    """
    if algorithm is HashAlgorithm.BCRYPT:
        salt = bcrypt.gensalt(rounds=options.cost)
        return bcrypt.hashpw(to_bytes(password), salt).decode("ascii")
    return _argon2(algorithm, options).hash(to_bytes(password))


def general_verify(password: str | bytes, hashed: str) -> bool:
    """Verify a password against a bcrypt or argon2 hash.

    Parameters
    ----------
    password : str | bytes
        The (already transformed) password.
    hashed : str
        The stored hash.

    Returns
    -------
    bool
        True if the password matches, False otherwise.
    """
    if hashed.startswith(ARGON2_PREFIX):
        try:
            # the argon2 type and parameters are read from the hash itself
            return PasswordHasher().verify(hashed, to_bytes(password))
        except (VerificationError, InvalidHashError, ValueError):
            # ValueError covers non ascii hashes
            return False
    if hashed.startswith(BCRYPT_PREFIXES):
        try:
            return bcrypt.checkpw(to_bytes(password), hashed.encode("ascii"))
        except ValueError:
            return False
    # Unknown format
    return False


def general_needs_rehash(
    hashed: str,
    algorithm: HashAlgorithm,
    options: StandardOptions,
) -> bool:
    """Check if a hash does not match the given algorithm and options.

    Parameters
    ----------
    hashed : str
        The stored hash.
    algorithm : HashAlgorithm
        The wanted algorithm.
    options : StandardOptions
        The wanted tuning options.

    Returns
    -------
    bool
        True if the hash needs rehash, False otherwise.
    """
    if algorithm is HashAlgorithm.BCRYPT:
        match = _BCRYPT_RE.match(hashed)
        if not match:
            return True
        return int(match.group(1)) != options.cost
    if not hashed.startswith(ARGON2_PREFIX):
        return True
    try:
        return _argon2(algorithm, options).check_needs_rehash(hashed)
    except InvalidHashError:
        return True


__all__ = [
    "general_hash",
    "general_verify",
    "general_needs_rehash",
]
