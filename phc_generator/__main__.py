# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Allow running the generator with ``python -m phc_generator``."""

from .cli import APP_NAME, app

if __name__ == "__main__":
    app(prog_name=APP_NAME)
