# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Random password and salt material."""

import secrets

from ..errors import RandomSourceError
from ._phc import b64encode_unpadded


def generate_material(length: int) -> str:
    """Generate random password or salt material.

    The returned text is the material itself: its UTF-8 bytes are what
    gets hashed, not the decoded random bytes.

    Parameters
    ----------
    length : int
        The number of random bytes to draw.

    Returns
    -------
    str
        The random bytes, unpadded standard base64 encoded.

    Raises
    ------
    RandomSourceError
        If the operating system's random source fails.
    """
    try:
        raw = secrets.token_bytes(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(
            f"Could not read {length} bytes from the random source: {exc}"
        ) from exc
    return b64encode_unpadded(raw)


__all__ = ["generate_material"]
