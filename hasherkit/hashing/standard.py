# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher for the bcrypt/argon2 family."""

import base64
import hashlib
from typing import Any, Mapping

from ._aliases import DEFAULT_ALGORITHM, HashAlgorithm
from ._general import general_hash, general_needs_rehash, general_verify
from ._length import MAX_PASSWORD_LENGTH, is_password_too_long, to_bytes
from ._options import StandardOptions, resolve_options
from .errors import ConfigurationError, PasswordTooLongError
from .protocol import Hasher


def prehash(password: str | bytes) -> str:
    """Normalize a password to a fixed size input.

    Parameters
    ----------
    password : str | bytes
        The raw password.

    Returns
    -------
    str
        The base64 encoded sha384 digest of the password.
    """
    digest = hashlib.sha384(to_bytes(password)).digest()
    return base64.b64encode(digest).decode("ascii")


class StandardHasher(Hasher):
    """Password hasher using bcrypt, argon2i or argon2id.

    Passwords are digested with sha384 (and base64 encoded) before
    reaching the algorithm, so inputs up to the max length never
    hit bcrypt's 72 bytes truncation.
    """

    def __init__(
        self,
        algorithm: HashAlgorithm = DEFAULT_ALGORITHM,
        options: Mapping[str, Any] | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize the hasher.

        Parameters
        ----------
        algorithm : HashAlgorithm, optional
            The algorithm to use, by default bcrypt.
        options : Mapping[str, Any] | None, optional
            The tuning options (memory_cost, time_cost, threads, cost).
        strict : bool, optional
            Reject unknown option keys, by default False.

        Raises
        ------
        ConfigurationError
            If the algorithm or an option is invalid.
        """
        try:
            self._algorithm = HashAlgorithm(algorithm)
        except ValueError as error:
            raise ConfigurationError(
                "algorithm", f"unknown algorithm {algorithm!r}"
            ) from error
        self._options = resolve_options(options, StandardOptions, strict)

    @property
    def algorithm(self) -> HashAlgorithm:
        """The algorithm in use."""
        return self._algorithm

    @property
    def options(self) -> StandardOptions:
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
        return general_hash(prehash(password), self._algorithm, self._options)

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
        if is_password_too_long(password):
            # compute never accepted it, nothing can match
            return False
        return general_verify(prehash(password), hashed)

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
        return general_needs_rehash(hashed, self._algorithm, self._options)

    def __repr__(self) -> str:
        return f"StandardHasher(algorithm={self._algorithm.value!r})"


__all__ = ["StandardHasher", "prehash"]
