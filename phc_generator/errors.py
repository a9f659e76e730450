# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised while generating a PHC string."""


class PhcGeneratorError(Exception):
    """Base class for all phc-generator errors."""


class SettingsError(PhcGeneratorError):
    """A ``PHC_GENERATOR_*`` environment variable holds an invalid value."""


class RandomSourceError(PhcGeneratorError):
    """The cryptographically secure random source could not be read."""


class DerivationError(PhcGeneratorError, ValueError):
    """The Argon2id primitive rejected the requested parameters."""


__all__ = [
    "PhcGeneratorError",
    "SettingsError",
    "RandomSourceError",
    "DerivationError",
]
