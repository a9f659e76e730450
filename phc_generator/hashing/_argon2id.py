# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Argon2id key derivation (delegates to argon2-cffi)."""

import logging
from dataclasses import dataclass

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from ..config import (
    DEFAULT_MEMORY_COST,
    DEFAULT_OUTPUT_LENGTH,
    DEFAULT_PARALLELISM,
    DEFAULT_TIME_COST,
)
from ..errors import DerivationError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Argon2idDeriver:
    """Argon2id deriver with fixed cost parameters."""

    time_cost: int = DEFAULT_TIME_COST
    memory_cost: int = DEFAULT_MEMORY_COST  # KiB
    parallelism: int = DEFAULT_PARALLELISM
    hash_len: int = DEFAULT_OUTPUT_LENGTH

    def derive(self, secret: bytes, salt: bytes) -> bytes:
        """Derive a raw Argon2id key.

        Parameters
        ----------
        secret : bytes
            The password material.
        salt : bytes
            The salt material.

        Returns
        -------
        bytes
            The derived key, ``hash_len`` bytes long.

        Raises
        ------
        DerivationError
            If argon2 rejects the parameters (e.g. a salt shorter than
            8 bytes or a memory cost below ``8 * parallelism``).
        """
        LOG.debug(
            "Deriving argon2id key: m=%d, t=%d, p=%d, len=%d",
            self.memory_cost,
            self.time_cost,
            self.parallelism,
            self.hash_len,
        )
        try:
            return hash_secret_raw(
                secret=secret,
                salt=salt,
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.hash_len,
                type=Type.ID,
                version=ARGON2_VERSION,
            )
        except HashingError as exc:
            raise DerivationError(str(exc)) from exc
        except (OverflowError, ValueError) as exc:
            # larger than the C integer types argon2 accepts
            raise DerivationError(f"Parameter out of range: {exc}") from exc


__all__ = ["Argon2idDeriver"]
