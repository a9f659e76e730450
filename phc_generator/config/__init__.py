# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Configuration module for phc-generator."""

from ._hashing import (
    DEFAULT_MEMORY_COST,
    DEFAULT_OUTPUT_LENGTH,
    DEFAULT_PARALLELISM,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_SALT_LENGTH,
    DEFAULT_SHOW_UUID,
    DEFAULT_TIME_COST,
)
from .settings import ENV_PREFIX, Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
    "DEFAULT_MEMORY_COST",
    "DEFAULT_TIME_COST",
    "DEFAULT_PARALLELISM",
    "DEFAULT_OUTPUT_LENGTH",
    "DEFAULT_PASSWORD_LENGTH",
    "DEFAULT_SALT_LENGTH",
    "DEFAULT_SHOW_UUID",
]
