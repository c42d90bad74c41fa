# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher factory.

Builds one active password hasher from a symbolic name and an options
mapping, and forwards the hasher operations to it.

Example
-------
>>> factory = PasswordHasherFactory()
>>> hashed = factory.build_hasher("standard", {"algo": "argon2id"}).compute(
...     "correct horse battery staple"
... )
"""

import logging
import threading
from typing import TYPE_CHECKING, Any, Mapping

from typing_extensions import Self

from ._aliases import (
    ALGORITHM_ALIASES,
    OPSLIMIT_ALIASES,
    resolve_algorithm,
    resolve_memlimit,
    resolve_opslimit,
)
from .errors import (
    ConfigurationError,
    NoHasherBuiltError,
    UnsupportedHasherError,
)
from .protocol import Hasher
from .sodium import SodiumHasher
from .standard import StandardHasher

if TYPE_CHECKING:
    from hasherkit.config import HasherSettings

LOG = logging.getLogger(__name__)

SUPPORTED_HASHERS = ("standard", "sodium")
SUPPORTED_ALGORITHMS = tuple(ALGORITHM_ALIASES)
SUPPORTED_SODIUM_OPTIONS = tuple(OPSLIMIT_ALIASES)
# keys consumed by the factory itself
_ALIAS_KEYS = ("algo", "opslimit", "memlimit")


class PasswordHasherFactory(Hasher):
    """Factory holding (at most) one active password hasher.

    The active hasher is replaced as a whole on every build, so a
    failed build leaves the previous one in place. The hashers are
    immutable, the forwarded calls run outside the lock.
    """

    def __init__(
        self,
        hasher: str = "",
        options: Mapping[str, Any] | None = None,
        *,
        strict_options: bool = False,
    ) -> None:
        """Initialize the factory.

        Parameters
        ----------
        hasher : str, optional
            The hasher to build right away ("standard" or "sodium"),
            by default none.
        options : Mapping[str, Any] | None, optional
            The options of the hasher to build.
        strict_options : bool, optional
            Reject unknown option keys on build, by default False.
        """
        self._lock = threading.Lock()
        self._hasher: StandardHasher | SodiumHasher | None = None
        self._strict_options = strict_options
        if hasher:
            self.build_hasher(hasher, options)

    @classmethod
    def from_settings(cls, settings: "HasherSettings") -> Self:
        """Create a factory with a hasher built from the settings.

        Parameters
        ----------
        settings : HasherSettings
            The settings to use.

        Returns
        -------
        PasswordHasherFactory
            The factory.
        """
        return cls(
            settings.hasher,
            settings.to_options(),
            strict_options=settings.strict_options,
        )

    @property
    def hasher(self) -> StandardHasher | SodiumHasher | None:
        """The active hasher, if one is built."""
        with self._lock:
            return self._hasher

    def build_hasher(
        self, kind: str, options: Mapping[str, Any] | None = None
    ) -> Self:
        """Build a new password hasher, replacing the active one.

        Parameters
        ----------
        kind : str
            The hasher to build, "standard" or "sodium".
        options : Mapping[str, Any] | None, optional
            The hasher options. "algo" (standard), "opslimit" and
            "memlimit" (sodium) are aliases, the rest are passed to
            the hasher.

        Returns
        -------
        Self
            The factory itself.

        Raises
        ------
        UnsupportedHasherError
            If the hasher is not supported.
        UnsupportedAlgorithmError
            If the algo alias is not supported.
        UnsupportedTuningError
            If the opslimit or memlimit alias is not supported.
        ConfigurationError
            If the options are invalid.
        """
        if kind not in SUPPORTED_HASHERS:
            raise UnsupportedHasherError(str(kind))
        if options is not None and not isinstance(options, Mapping):
            raise ConfigurationError(
                "options", f"expected a mapping, got {type(options).__name__}"
            )
        options = dict(options or {})
        algorithm = resolve_algorithm(options.get("algo"))
        opslimit = resolve_opslimit(options.get("opslimit"))
        memlimit = resolve_memlimit(options.get("memlimit"))
        rest = {k: v for k, v in options.items() if k not in _ALIAS_KEYS}
        hasher: StandardHasher | SodiumHasher
        if kind == "standard":
            hasher = StandardHasher(
                algorithm, rest, strict=self._strict_options
            )
        else:
            hasher = SodiumHasher(
                {**rest, "opslimit": int(opslimit), "memlimit": int(memlimit)},
                strict=self._strict_options,
            )
        with self._lock:
            self._hasher = hasher
        LOG.debug("Built %s password hasher: %r", kind, hasher)
        return self

    def clear_hasher(self) -> None:
        """Drop the active password hasher."""
        with self._lock:
            self._hasher = None
        LOG.debug("Cleared the password hasher")

    def _active(self) -> StandardHasher | SodiumHasher:
        with self._lock:
            hasher = self._hasher
        if hasher is None:
            raise NoHasherBuiltError()
        return hasher

    def compute(self, password: str | bytes) -> str:
        """Compute a new hash with the active hasher.

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
        NoHasherBuiltError
            If no hasher was built.
        """
        return self._active().compute(password)

    def verify(self, password: str | bytes, hashed: str) -> bool:
        """Verify a password with the active hasher.

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

        Raises
        ------
        NoHasherBuiltError
            If no hasher was built.
        """
        return self._active().verify(password, hashed)

    def needs_rehash(self, hashed: str) -> bool:
        """Check if a hash needs rehash with the active hasher.

        Parameters
        ----------
        hashed : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash needs rehash, False otherwise.

        Raises
        ------
        NoHasherBuiltError
            If no hasher was built.
        """
        return self._active().needs_rehash(hashed)


__all__ = [
    "PasswordHasherFactory",
    "SUPPORTED_HASHERS",
    "SUPPORTED_ALGORITHMS",
    "SUPPORTED_SODIUM_OPTIONS",
]
