# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password length limits."""

MIN_RECOMMENDED_PASSWORD_LENGTH = 8
# bcrypt-family implementations truncate or reject above this.
MAX_PASSWORD_LENGTH = 4065


def to_bytes(password: str | bytes) -> bytes:
    """Get the raw bytes of a password.

    Parameters
    ----------
    password : str | bytes
        The password, str values are encoded as utf-8.

    Returns
    -------
    bytes
        The password bytes.
    """
    if isinstance(password, bytes):
        return password
    return password.encode("utf-8")


def is_password_too_long(password: str | bytes) -> bool:
    """Check if a password is longer than the allowed maximum.

    The length is measured in bytes, not characters.

    Parameters
    ----------
    password : str | bytes
        The password to check.

    Returns
    -------
    bool
        True if the password is too long, False otherwise.
    """
    return len(to_bytes(password)) > MAX_PASSWORD_LENGTH


__all__ = [
    "MIN_RECOMMENDED_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "is_password_too_long",
    "to_bytes",
]
