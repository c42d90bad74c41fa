# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import logging
import logging.config
from typing import Any, Dict, NoReturn

import typer

from hasherkit._logging import LogLevel, get_log_level, get_logging_config
from hasherkit._version import __version__
from hasherkit.config import HasherSettings
from hasherkit.hashing import (
    HasherError,
    PasswordHasherFactory,
    generate_password,
)

APP_NAME = "hasherkit"
APP_HELP = "Compute, verify and age out password hashes"

DEFAULT_SETTINGS = HasherSettings.load()

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_short=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=2)


def _get_factory(ctx: typer.Context) -> PasswordHasherFactory:
    obj: Dict[str, Any] = ctx.obj
    try:
        return PasswordHasherFactory(
            obj["hasher"],
            obj["options"],
            strict_options=DEFAULT_SETTINGS.strict_options,
        )
    except HasherError as error:
        _fail(error)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    hasher: str = typer.Option(
        default=DEFAULT_SETTINGS.hasher,
        help="The password hasher (standard or sodium)",
    ),
    algo: str = typer.Option(
        default=DEFAULT_SETTINGS.algo,
        help="The standard hasher algorithm (default, bcrypt, argon2i, argon2id)",
    ),
    opslimit: str = typer.Option(
        default=DEFAULT_SETTINGS.opslimit,
        help="The sodium ops limit (interactive, moderate, sensitive)",
    ),
    memlimit: str = typer.Option(
        default=DEFAULT_SETTINGS.memlimit,
        help="The sodium memory limit (interactive, moderate, sensitive)",
    ),
    memory_cost: int = typer.Option(
        default=DEFAULT_SETTINGS.memory_cost,
        help="The argon2 memory cost in KiB",
    ),
    time_cost: int = typer.Option(
        default=DEFAULT_SETTINGS.time_cost,
        help="The argon2 time cost",
    ),
    threads: int = typer.Option(
        default=DEFAULT_SETTINGS.threads,
        help="The argon2 parallelism",
    ),
    cost: int = typer.Option(
        default=DEFAULT_SETTINGS.cost,
        help="The bcrypt cost",
    ),
) -> None:
    """Compute, verify and age out password hashes."""
    level = LogLevel.DEBUG if debug else log_level
    logging.config.dictConfig(get_logging_config(level.value))
    # same normalization as the settings
    hasher = hasher.strip().lower()
    options: Dict[str, Any] = {
        "algo": algo.strip().lower(),
        "opslimit": opslimit.strip().lower(),
        "memlimit": memlimit.strip().lower(),
    }
    if hasher == "standard":
        options.update(
            memory_cost=memory_cost,
            time_cost=time_cost,
            threads=threads,
            cost=cost,
        )
    ctx.obj = {"hasher": hasher, "options": options}
    LOG.debug("Using the %s password hasher", hasher)


@app.command("hash")
def hash_password(
    ctx: typer.Context,
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to hash",
    ),
) -> None:
    """Compute a new hash."""
    factory = _get_factory(ctx)
    try:
        hashed = factory.compute(password)
    except HasherError as error:
        _fail(error)
    typer.echo(hashed)


@app.command("verify")
def verify_password(
    ctx: typer.Context,
    hashed: str = typer.Argument(..., help="The stored hash"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to check",
    ),
) -> None:
    """Verify a password against a hash (exit code 1 on mismatch)."""
    factory = _get_factory(ctx)
    if factory.verify(password, hashed):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=1)


@app.command("needs-rehash")
def needs_rehash(
    ctx: typer.Context,
    hashed: str = typer.Argument(..., help="The stored hash"),
) -> None:
    """Check if a hash needs rehash with the current options."""
    factory = _get_factory(ctx)
    typer.echo("true" if factory.needs_rehash(hashed) else "false")


@app.command("generate")
def generate(
    length: int = typer.Option(
        16,
        "--length",
        "-l",
        help="The password length",
    ),
) -> None:
    """Generate a random password."""
    try:
        password = generate_password(length)
    except ValueError as error:
        _fail(error)
    typer.echo(password)


if __name__ == "__main__":
    app()
