# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""PHC string formatting for Argon2id."""

import base64
import re

from argon2.low_level import ARGON2_VERSION

PHC_PATTERN = re.compile(
    r"^\$argon2id\$v=(\d+)\$m=(\d+),t=(\d+),p=(\d+)"
    r"\$([A-Za-z0-9+/]+)\$([A-Za-z0-9+/]+)$"
)


def b64encode_unpadded(data: bytes) -> str:
    """Encode bytes as standard base64 without ``=`` padding.

    Parameters
    ----------
    data : bytes
        The bytes to encode.

    Returns
    -------
    str
        The encoded text.
    """
    return base64.b64encode(data).decode("ascii").rstrip("=")


def format_phc(
    salt: bytes,
    digest: bytes,
    memory_cost: int,
    time_cost: int,
    parallelism: int,
) -> str:
    """Render an Argon2id result as a PHC string.

    Parameters
    ----------
    salt : bytes
        The raw salt bytes.
    digest : bytes
        The derived key.
    memory_cost : int
        The memory cost in KiB.
    time_cost : int
        The number of passes.
    parallelism : int
        The number of lanes.

    Returns
    -------
    str
        ``$argon2id$v=19$m=<m>,t=<t>,p=<p>$<salt>$<digest>``
    """
    # pylint: disable=inconsistent-quotes
    return (
        f"$argon2id$v={ARGON2_VERSION}"
        f"$m={memory_cost},t={time_cost},p={parallelism}"
        f"${b64encode_unpadded(salt)}"
        f"${b64encode_unpadded(digest)}"
    )


__all__ = ["PHC_PATTERN", "b64encode_unpadded", "format_phc"]
