# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for password hashing strategies."""

    def compute(self, password: str | bytes) -> str:
        """Compute a new hash.

        Parameters
        ----------
        password : str | bytes
            The password to hash.
        """
        ...

    def verify(self, password: str | bytes, hashed: str) -> bool:
        """Verify the password matches the hash provided.

        Parameters
        ----------
        password : str | bytes
            The password to check.
        hashed : str
            The stored hash.
        """
        ...

    def needs_rehash(self, hashed: str) -> bool:
        """Check if the stored hash needs rehash.

        Parameters
        ----------
        hashed : str
            The stored hash.
        """
        ...


__all__ = ["Hasher"]
