# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher for the sodium memory-hard family."""

from typing import Any, Mapping

from ._length import MAX_PASSWORD_LENGTH, is_password_too_long
from ._options import SodiumOptions, resolve_options
from ._sodium import (
    memory_hard_hash,
    memory_hard_needs_rehash,
    memory_hard_verify,
)
from .errors import PasswordTooLongError
from .protocol import Hasher


class SodiumHasher(Hasher):
    """Password hasher using libsodium's crypto_pwhash_str (argon2id)."""

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize the hasher.

        Parameters
        ----------
        options : Mapping[str, Any] | None, optional
            The tuning options (opslimit, memlimit).
        strict : bool, optional
            Reject unknown option keys, by default False.
        """
        self._options = resolve_options(options, SodiumOptions, strict)

    @property
    def options(self) -> SodiumOptions:
        """The resolved options."""
        return self._options

    def compute(self, password: str | bytes) -> str:
        """Compute a new hash.

        Parameters
        ----------
        password : str | bytes
            The password to hash.

        Returns
        -------
        str
            The encoded hash.

        Raises
        ------
        PasswordTooLongError
            If the password is longer than the allowed maximum.
        """
        if is_password_too_long(password):
            raise PasswordTooLongError(MAX_PASSWORD_LENGTH)
        return memory_hard_hash(
            password, self._options.opslimit, self._options.memlimit
        )

    def verify(self, password: str | bytes, hashed: str) -> bool:
        """Verify the password matches the hash provided.

        Parameters
        ----------
        password : str | bytes
            The password to check.
        hashed : str
            The stored hash.

        Returns
        -------
        bool
            True if the password matches, False otherwise.
        """
        return memory_hard_verify(hashed, password)

    def needs_rehash(self, hashed: str) -> bool:
        """Check if the stored hash needs rehash.

        Parameters
        ----------
        hashed : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash needs rehash, False otherwise.
        """
        return memory_hard_needs_rehash(
            hashed, self._options.opslimit, self._options.memlimit
        )

    def __repr__(self) -> str:
        return (
            f"SodiumHasher(opslimit={self._options.opslimit}, "
            f"memlimit={self._options.memlimit})"
        )


__all__ = ["SodiumHasher"]
