# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher settings module."""

import logging
from typing import Any, Dict, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from hasherkit._logging import get_log_level

from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._hasher import (
    get_algo,
    get_cost,
    get_hasher,
    get_memlimit,
    get_memory_cost,
    get_opslimit,
    get_strict_options,
    get_threads,
    get_time_cost,
)

LOG = logging.getLogger(__name__)

HasherKind = Literal["standard", "sodium"]


class HasherSettings(BaseSettings):
    """Password hasher settings."""

    hasher: HasherKind = get_hasher()  # type: ignore[assignment]
    # standard
    algo: str = get_algo()
    memory_cost: Annotated[int, Field(ge=8)] = get_memory_cost()
    time_cost: Annotated[int, Field(ge=1)] = get_time_cost()
    threads: Annotated[int, Field(ge=1, le=255)] = get_threads()
    cost: Annotated[int, Field(ge=4, le=31)] = get_cost()
    # sodium
    opslimit: str = get_opslimit()
    memlimit: str = get_memlimit()
    strict_options: bool = get_strict_options()
    log_level: str = get_log_level()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value

        Returns
        -------
        Any
            The upper-cased log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @field_validator("hasher", "algo", "opslimit", "memlimit", mode="before")
    @classmethod
    def normalize_alias(cls, value: Any) -> Any:
        """Normalize the symbolic names.

        Parameters
        ----------
        value : Any
            The value

        Returns
        -------
        Any
            The stripped, lower-cased name
        """
        if isinstance(value, str):
            return value.strip().lower()
        return value  # pragma: no cover

    @classmethod
    def load(cls) -> "HasherSettings":
        """Load the settings.

        Returns
        -------
        HasherSettings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        instance = cls()
        LOG.debug("Loaded %s hasher settings", instance.hasher)
        return instance

    def to_options(self) -> Dict[str, Any]:
        """Get the options to build the password hasher with.

        Returns
        -------
        Dict[str, Any]
            The options for PasswordHasherFactory.build_hasher
        """
        options: Dict[str, Any] = {
            "algo": self.algo,
            "opslimit": self.opslimit,
            "memlimit": self.memlimit,
        }
        if self.hasher == "standard":
            options.update(
                memory_cost=self.memory_cost,
                time_cost=self.time_cost,
                threads=self.threads,
                cost=self.cost,
            )
        return options
