# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher errors."""


class HasherError(Exception):
    """Base class for all password hasher errors."""


class PasswordTooLongError(HasherError, ValueError):
    """The supplied password exceeds the maximum allowed byte length."""

    def __init__(self, max_length: int) -> None:
        self.max_length = max_length
        super().__init__(
            f"The password supplied is too long (max {max_length} bytes)."
        )


class ConfigurationError(HasherError, ValueError):
    """A hasher option has an invalid type or value."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Invalid option '{key}': {message}")


class UnsupportedHasherError(HasherError, ValueError):
    """The requested password hasher is not supported."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The password hasher '{name}' is not supported.")


class UnsupportedAlgorithmError(HasherError, ValueError):
    """The requested password algorithm is not supported."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"The password algorithm '{name}' supplied is not supported."
        )


class UnsupportedTuningError(HasherError, ValueError):
    """The requested sodium ops/mem limit is not supported."""

    def __init__(self, option: str, name: str) -> None:
        self.option = option
        self.name = name
        super().__init__(f"The {option} '{name}' supplied is not supported.")


class NoHasherBuiltError(HasherError, RuntimeError):
    """A hasher operation was called before a password hasher was built."""

    def __init__(self) -> None:
        super().__init__("A password hasher was not built.")


__all__ = [
    "HasherError",
    "PasswordTooLongError",
    "ConfigurationError",
    "UnsupportedHasherError",
    "UnsupportedAlgorithmError",
    "UnsupportedTuningError",
    "NoHasherBuiltError",
]
