# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,unused-argument

"""Test hasherkit.cli.*."""

import subprocess  # nosemgrep # nosec
import sys
from typing import List
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from hasherkit._version import __version__
from hasherkit.cli import app

MODULE_TO_PATCH = "hasherkit.cli"

runner = CliRunner()


def get_fast_args() -> List[str]:
    """Get cheap hasher arguments.

    Returns
    -------
    List[str]
        Cli arguments for a quick bcrypt hasher.
    """
    return ["--hasher", "standard", "--algo", "bcrypt", "--cost", "4"]


def _hash(password: str) -> str:
    result = runner.invoke(
        app, get_fast_args() + ["hash", "--password", password]
    )
    assert result.exit_code == 0
    return result.stdout.strip()


def test_version() -> None:
    """Test version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_python_m() -> None:
    """Test python3 -m."""
    # just to cover __main__.py
    result = subprocess.run(
        [sys.executable, "-m", "hasherkit", "--version"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=False,
    )
    assert __version__ in result.stdout.decode()
    assert result.returncode == 0


def test_help() -> None:
    """Test help."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "needs-rehash" in result.output


def test_invalid_log_level() -> None:
    """Test invalid log level."""
    result = runner.invoke(app, ["--log-level", "invalid", "generate"])
    assert result.exit_code != 0


def test_hash_and_verify() -> None:
    """Test hashing then verifying a password."""
    hashed = _hash("secret")
    assert hashed.startswith("$2b$04$")

    result = runner.invoke(
        app, get_fast_args() + ["verify", hashed, "--password", "secret"]
    )
    assert result.exit_code == 0
    assert "valid" in result.stdout


def test_verify_mismatch() -> None:
    """Test verifying a wrong password."""
    hashed = _hash("secret")
    result = runner.invoke(
        app, get_fast_args() + ["verify", hashed, "--password", "other"]
    )
    assert result.exit_code == 1
    assert "invalid" in result.stdout


def test_hash_prompt() -> None:
    """Test the password is prompted for if not given."""
    result = runner.invoke(app, get_fast_args() + ["hash"], input="secret\n")
    assert result.exit_code == 0
    assert "$2b$04$" in result.stdout


def test_needs_rehash() -> None:
    """Test checking if a hash needs rehash."""
    hashed = _hash("secret")
    result = runner.invoke(app, get_fast_args() + ["needs-rehash", hashed])
    assert result.exit_code == 0
    assert result.stdout.strip() == "false"

    stronger = ["--algo", "bcrypt", "--cost", "5", "needs-rehash", hashed]
    result = runner.invoke(app, stronger)
    assert result.exit_code == 0
    assert result.stdout.strip() == "true"


def test_sodium_hasher() -> None:
    """Test the sodium hasher from the command line."""
    args = [
        "--hasher",
        "sodium",
        "--opslimit",
        "interactive",
        "--memlimit",
        "interactive",
    ]
    result = runner.invoke(app, args + ["hash", "--password", "secret"])
    assert result.exit_code == 0
    hashed = result.stdout.strip()
    assert hashed.startswith("$argon2id$")

    result = runner.invoke(
        app, args + ["verify", hashed, "--password", "secret"]
    )
    assert result.exit_code == 0


def test_names_are_normalized() -> None:
    """Test hasher and alias names are case insensitive."""
    result = runner.invoke(
        app,
        [
            "--hasher",
            " Standard ",
            "--algo",
            "BCRYPT",
            "--opslimit",
            "Moderate",
            "--memlimit",
            "MODERATE",
            "--cost",
            "4",
            "hash",
            "--password",
            "pw",
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.strip().startswith("$2b$04$")


def test_unsupported_algorithm() -> None:
    """Test an unknown algorithm."""
    result = runner.invoke(
        app, ["--algo", "md5", "hash", "--password", "secret"]
    )
    assert result.exit_code == 2


def test_unsupported_hasher() -> None:
    """Test an unknown hasher."""
    result = runner.invoke(
        app, ["--hasher", "scrypt", "needs-rehash", "$2b$04$hash"]
    )
    assert result.exit_code == 2


def test_too_long_password() -> None:
    """Test hashing a too long password."""
    result = runner.invoke(
        app, get_fast_args() + ["hash", "--password", "a" * 4066]
    )
    assert result.exit_code == 2


def test_generate() -> None:
    """Test generating a password."""
    result = runner.invoke(app, ["generate", "--length", "20"])
    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 20


def test_generate_too_short() -> None:
    """Test generating a too short password."""
    result = runner.invoke(app, ["generate", "-l", "8"])
    assert result.exit_code == 2


@patch(f"{MODULE_TO_PATCH}.logging.config.dictConfig")
def test_debug(mock_dict_config: MagicMock) -> None:
    """Test debug logging."""
    result = runner.invoke(app, ["--debug", "generate"])
    assert result.exit_code == 0
    config = mock_dict_config.call_args[0][0]
    assert config["loggers"]["hasherkit"]["level"] == "DEBUG"
