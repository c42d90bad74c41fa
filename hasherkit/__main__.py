# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Allow running hasherkit as a module: python -m hasherkit."""

from hasherkit.cli import app

if __name__ == "__main__":
    app()
