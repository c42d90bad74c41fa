# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hasher related configuration.

Environment variables (with prefix HASHERKIT_)
----------------------------------------------
HASHER (str) # default: standard
ALGO (str) # default: default
OPSLIMIT (str) # default: moderate
MEMLIMIT (str) # default: moderate
MEMORY_COST (int) # default: 65536
TIME_COST (int) # default: 4
THREADS (int) # default: 1
COST (int) # default: 10
STRICT_OPTIONS (bool) # default: False

Command line arguments (no prefix)
----------------------------------
--hasher (str)
--algo (str)
--opslimit (str)
--memlimit (str)
--memory-cost (int)
--time-cost (int)
--threads (int)
--cost (int)
--strict-options|--no-strict-options (bool)
"""

from hasherkit.hashing._options import (
    ARGON2_DEFAULT_MEMORY_COST,
    ARGON2_DEFAULT_THREADS,
    ARGON2_DEFAULT_TIME_COST,
    BCRYPT_DEFAULT_COST,
)

from ._common import get_value


def get_hasher() -> str:
    """Get the password hasher to build.

    Returns
    -------
    str
        The password hasher ("standard" or "sodium")
    """
    return get_value("--hasher", "HASHER", str, "standard")


def get_algo() -> str:
    """Get the standard hasher's algorithm alias.

    Returns
    -------
    str
        The algorithm alias
    """
    return get_value("--algo", "ALGO", str, "default")


def get_opslimit() -> str:
    """Get the sodium hasher's ops limit alias.

    Returns
    -------
    str
        The ops limit alias
    """
    return get_value("--opslimit", "OPSLIMIT", str, "moderate")


def get_memlimit() -> str:
    """Get the sodium hasher's memory limit alias.

    Returns
    -------
    str
        The memory limit alias
    """
    return get_value("--memlimit", "MEMLIMIT", str, "moderate")


def get_memory_cost() -> int:
    """Get the argon2 memory cost (KiB).

    Returns
    -------
    int
        The memory cost
    """
    return get_value(
        "--memory-cost", "MEMORY_COST", int, ARGON2_DEFAULT_MEMORY_COST
    )


def get_time_cost() -> int:
    """Get the argon2 time cost.

    Returns
    -------
    int
        The time cost
    """
    return get_value("--time-cost", "TIME_COST", int, ARGON2_DEFAULT_TIME_COST)


def get_threads() -> int:
    """Get the argon2 parallelism.

    Returns
    -------
    int
        The number of threads
    """
    return get_value("--threads", "THREADS", int, ARGON2_DEFAULT_THREADS)


def get_cost() -> int:
    """Get the bcrypt cost.

    Returns
    -------
    int
        The cost
    """
    return get_value("--cost", "COST", int, BCRYPT_DEFAULT_COST)


def get_strict_options() -> bool:
    """Get whether unknown hasher options are rejected.

    Returns
    -------
    bool
        Whether to reject unknown options
    """
    return get_value("--strict-options", "STRICT_OPTIONS", bool, False)
