# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Key derivation protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyDeriver(Protocol):  # pragma: no cover
    """Protocol for password key derivation implementations."""

    def derive(self, secret: bytes, salt: bytes) -> bytes:
        """Derive a raw key from a secret and a salt.

        Parameters
        ----------
        secret : bytes
            The password material
        salt : bytes
            The salt material
        """
        ...


__all__ = ["KeyDeriver"]
