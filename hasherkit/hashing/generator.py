# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Random password generation."""

import secrets
import string

from ._length import MIN_RECOMMENDED_PASSWORD_LENGTH

PASSWORD_ALPHABET = string.ascii_letters + string.digits + string.punctuation


def generate_password(length: int) -> str:
    """Generate a new random password.

    Parameters
    ----------
    length : int
        The desired length, must be greater than the minimum
        recommended password length.

    Returns
    -------
    str
        The generated password.

    Raises
    ------
    ValueError
        If the length is too short.
    """
    if length <= MIN_RECOMMENDED_PASSWORD_LENGTH:
        raise ValueError(
            f"Length must be greater than {MIN_RECOMMENDED_PASSWORD_LENGTH}"
        )
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


__all__ = ["generate_password", "PASSWORD_ALPHABET"]
