# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=invalid-name
"""Symbolic names for password algorithms and sodium tuning limits."""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping

from nacl.pwhash import argon2id

from .errors import UnsupportedAlgorithmError, UnsupportedTuningError


class HashAlgorithm(str, Enum):
    """Algorithms of the general password hashing family."""

    BCRYPT = "bcrypt"
    ARGON2I = "argon2i"
    ARGON2ID = "argon2id"


class OpsLimit(IntEnum):
    """Sodium argon2id ops limits."""

    INTERACTIVE = argon2id.OPSLIMIT_INTERACTIVE
    MODERATE = argon2id.OPSLIMIT_MODERATE
    SENSITIVE = argon2id.OPSLIMIT_SENSITIVE


class MemLimit(IntEnum):
    """Sodium argon2id memory limits (in bytes)."""

    INTERACTIVE = argon2id.MEMLIMIT_INTERACTIVE
    MODERATE = argon2id.MEMLIMIT_MODERATE
    SENSITIVE = argon2id.MEMLIMIT_SENSITIVE


DEFAULT_ALGORITHM = HashAlgorithm.BCRYPT
DEFAULT_ALGORITHM_ALIAS = "default"
DEFAULT_SODIUM_ALIAS = "moderate"

ALGORITHM_ALIASES: Mapping[str, HashAlgorithm] = MappingProxyType(
    {
        "default": DEFAULT_ALGORITHM,
        "bcrypt": HashAlgorithm.BCRYPT,
        "argon2i": HashAlgorithm.ARGON2I,
        "argon2id": HashAlgorithm.ARGON2ID,
    }
)
OPSLIMIT_ALIASES: Mapping[str, OpsLimit] = MappingProxyType(
    {
        "moderate": OpsLimit.MODERATE,
        "interactive": OpsLimit.INTERACTIVE,
        "sensitive": OpsLimit.SENSITIVE,
    }
)
MEMLIMIT_ALIASES: Mapping[str, MemLimit] = MappingProxyType(
    {
        "moderate": MemLimit.MODERATE,
        "interactive": MemLimit.INTERACTIVE,
        "sensitive": MemLimit.SENSITIVE,
    }
)


def resolve_algorithm(name: str | None) -> HashAlgorithm:
    """Resolve an algorithm alias.

    Parameters
    ----------
    name : str | None
        The alias, None means "default".

    Returns
    -------
    HashAlgorithm
        The resolved algorithm.

    Raises
    ------
    UnsupportedAlgorithmError
        If the alias is unknown.
    """
    if name is None:
        name = DEFAULT_ALGORITHM_ALIAS
    if not isinstance(name, str) or name not in ALGORITHM_ALIASES:
        raise UnsupportedAlgorithmError(str(name))
    return ALGORITHM_ALIASES[name]


def resolve_opslimit(name: str | None) -> OpsLimit:
    """Resolve a sodium ops limit alias.

    Parameters
    ----------
    name : str | None
        The alias, None means "moderate".

    Returns
    -------
    OpsLimit
        The resolved ops limit.

    Raises
    ------
    UnsupportedTuningError
        If the alias is unknown.
    """
    if name is None:
        name = DEFAULT_SODIUM_ALIAS
    if not isinstance(name, str) or name not in OPSLIMIT_ALIASES:
        raise UnsupportedTuningError("opslimit", str(name))
    return OPSLIMIT_ALIASES[name]


def resolve_memlimit(name: str | None) -> MemLimit:
    """Resolve a sodium memory limit alias.

    Parameters
    ----------
    name : str | None
        The alias, None means "moderate".

    Returns
    -------
    MemLimit
        The resolved memory limit.

    Raises
    ------
    UnsupportedTuningError
        If the alias is unknown.
    """
    if name is None:
        name = DEFAULT_SODIUM_ALIAS
    if not isinstance(name, str) or name not in MEMLIMIT_ALIASES:
        raise UnsupportedTuningError("memlimit", str(name))
    return MEMLIMIT_ALIASES[name]


__all__ = [
    "HashAlgorithm",
    "OpsLimit",
    "MemLimit",
    "DEFAULT_ALGORITHM",
    "ALGORITHM_ALIASES",
    "OPSLIMIT_ALIASES",
    "MEMLIMIT_ALIASES",
    "resolve_algorithm",
    "resolve_opslimit",
    "resolve_memlimit",
]
