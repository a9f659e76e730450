# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Generate argon2id PHC strings."""

from ._version import __version__
from .errors import (
    DerivationError,
    PhcGeneratorError,
    RandomSourceError,
    SettingsError,
)
from .generator import HashRequest, PhcResult, generate_phc, resolve_request

__all__ = [
    "__version__",
    "HashRequest",
    "PhcResult",
    "generate_phc",
    "resolve_request",
    "PhcGeneratorError",
    "SettingsError",
    "RandomSourceError",
    "DerivationError",
]
