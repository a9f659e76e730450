# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Argon2id key derivation and PHC formatting."""

from ._argon2id import Argon2idDeriver
from ._material import generate_material
from ._phc import PHC_PATTERN, b64encode_unpadded, format_phc
from .protocol import KeyDeriver

__all__ = [
    "Argon2idDeriver",
    "KeyDeriver",
    "PHC_PATTERN",
    "b64encode_unpadded",
    "format_phc",
    "generate_material",
]
