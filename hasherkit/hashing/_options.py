# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hasher options resolution."""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Annotated

from ._aliases import MemLimit, OpsLimit
from .errors import ConfigurationError

# argon2 defaults of PHP's password_hash
ARGON2_DEFAULT_MEMORY_COST = 65536  # KiB
ARGON2_DEFAULT_TIME_COST = 4
ARGON2_DEFAULT_THREADS = 1
BCRYPT_DEFAULT_COST = 10


def _ensure_int(value: Any) -> Any:
    # bool is an int subclass, but never a valid cost
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {type(value).__name__}")
    return int(value)


OptionInt = Annotated[int, BeforeValidator(_ensure_int), Field(ge=0)]


class StandardOptions(BaseModel):
    """Tuning options of the general password hashing family."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    memory_cost: OptionInt = ARGON2_DEFAULT_MEMORY_COST
    time_cost: OptionInt = ARGON2_DEFAULT_TIME_COST
    threads: OptionInt = ARGON2_DEFAULT_THREADS
    cost: OptionInt = BCRYPT_DEFAULT_COST


class SodiumOptions(BaseModel):
    """Tuning options of the sodium memory-hard family."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    opslimit: OptionInt = int(OpsLimit.MODERATE)
    memlimit: OptionInt = int(MemLimit.MODERATE)


OptionsT = TypeVar("OptionsT", StandardOptions, SodiumOptions)


def resolve_options(
    raw: Mapping[str, Any] | None,
    schema: type[OptionsT],
    strict: bool = False,
) -> OptionsT:
    """Validate raw options and fill in the defaults.

    Parameters
    ----------
    raw : Mapping[str, Any] | None
        The raw options.
    schema : type[OptionsT]
        The options model to resolve into.
    strict : bool, optional
        Reject keys the schema does not define, by default False
        (unknown keys are ignored).

    Returns
    -------
    OptionsT
        The resolved options.

    Raises
    ------
    ConfigurationError
        If an option has an invalid type or value.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            "options", f"expected a mapping, got {type(raw).__name__}"
        )
    if strict:
        known = schema.model_fields
        unknown = sorted(str(key) for key in raw if key not in known)
        if unknown:
            raise ConfigurationError(unknown[0], "unknown option")
    try:
        return schema.model_validate(dict(raw))
    except PydanticValidationError as error:
        first = error.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or "options"
        raise ConfigurationError(key, first["msg"]) from error


__all__ = [
    "StandardOptions",
    "SodiumOptions",
    "resolve_options",
    "ARGON2_DEFAULT_MEMORY_COST",
    "ARGON2_DEFAULT_TIME_COST",
    "ARGON2_DEFAULT_THREADS",
    "BCRYPT_DEFAULT_COST",
]
