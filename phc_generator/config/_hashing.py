# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Hashing related defaults.

Environment variables (with prefix PHC_GENERATOR_)
--------------------------------------------------
MEMORY_COST (int) # default: 19456
TIME_COST (int) # default: 2
PARALLELISM (int) # default: 1
OUTPUT_LENGTH (int) # default: 32
PASSWORD_LENGTH (int) # default: 64
SALT_LENGTH (int) # default: 16
SHOW_UUID (bool) # default: True

Command line arguments (no prefix)
----------------------------------
--memory-cost|-m (int)  # default: 19456
--time-cost|-t (int)  # default: 2
--parallelism|-p (int)  # default: 1
--output-length|-l (int)  # default: 32
--password-length (int)  # default: 64
--salt-length (int)  # default: 16
--uuid|--no-uuid (bool)  # default: True
"""

DEFAULT_MEMORY_COST = 19456  # KiB
DEFAULT_TIME_COST = 2
DEFAULT_PARALLELISM = 1
DEFAULT_OUTPUT_LENGTH = 32
# 512 bits, enough for consumers that want a 64 byte signing key
DEFAULT_PASSWORD_LENGTH = 64
DEFAULT_SALT_LENGTH = 16
DEFAULT_SHOW_UUID = True
