# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hashing, verification and rehash checks."""

from ._aliases import (
    ALGORITHM_ALIASES,
    MEMLIMIT_ALIASES,
    OPSLIMIT_ALIASES,
    HashAlgorithm,
    MemLimit,
    OpsLimit,
)
from ._length import (
    MAX_PASSWORD_LENGTH,
    MIN_RECOMMENDED_PASSWORD_LENGTH,
    is_password_too_long,
)
from ._options import SodiumOptions, StandardOptions, resolve_options
from .errors import (
    ConfigurationError,
    HasherError,
    NoHasherBuiltError,
    PasswordTooLongError,
    UnsupportedAlgorithmError,
    UnsupportedHasherError,
    UnsupportedTuningError,
)
from .factory import (
    SUPPORTED_ALGORITHMS,
    SUPPORTED_HASHERS,
    SUPPORTED_SODIUM_OPTIONS,
    PasswordHasherFactory,
)
from .generator import PASSWORD_ALPHABET, generate_password
from .protocol import Hasher
from .sodium import SodiumHasher
from .standard import StandardHasher

__all__ = [
    "Hasher",
    "PasswordHasherFactory",
    "StandardHasher",
    "SodiumHasher",
    "HashAlgorithm",
    "OpsLimit",
    "MemLimit",
    "ALGORITHM_ALIASES",
    "OPSLIMIT_ALIASES",
    "MEMLIMIT_ALIASES",
    "SUPPORTED_HASHERS",
    "SUPPORTED_ALGORITHMS",
    "SUPPORTED_SODIUM_OPTIONS",
    "StandardOptions",
    "SodiumOptions",
    "resolve_options",
    "MAX_PASSWORD_LENGTH",
    "MIN_RECOMMENDED_PASSWORD_LENGTH",
    "is_password_too_long",
    "generate_password",
    "PASSWORD_ALPHABET",
    "HasherError",
    "PasswordTooLongError",
    "ConfigurationError",
    "UnsupportedHasherError",
    "UnsupportedAlgorithmError",
    "UnsupportedTuningError",
    "NoHasherBuiltError",
]
