# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Password hashing policy layer over bcrypt, argon2 and libsodium."""

from ._version import __version__
from .hashing import (
    Hasher,
    PasswordHasherFactory,
    SodiumHasher,
    StandardHasher,
)

__all__ = [
    "__version__",
    "Hasher",
    "PasswordHasherFactory",
    "SodiumHasher",
    "StandardHasher",
]
