# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-yield-doc
"""Shared fixtures for tests."""

import os
from collections.abc import Generator

import pytest

ENV_KEY_PREFIX = "HASHERKIT_"


@pytest.fixture(scope="function", autouse=True)
def reset_env() -> Generator[None, None, None]:
    """Drop any hasherkit environment variables around each test."""
    saved = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_KEY_PREFIX)
    }
    for key in saved:
        os.environ.pop(key, None)
    yield
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved)
