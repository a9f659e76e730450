# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Generate a PHC string for a (possibly generated) password and salt."""

import dataclasses
import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .config import (
    DEFAULT_MEMORY_COST,
    DEFAULT_OUTPUT_LENGTH,
    DEFAULT_PARALLELISM,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_SALT_LENGTH,
    DEFAULT_TIME_COST,
    Settings,
)
from .errors import RandomSourceError
from .hashing import (
    Argon2idDeriver,
    KeyDeriver,
    format_phc,
    generate_material,
)

LOG = logging.getLogger(__name__)

LABEL_WIDTH = 11


@dataclass(frozen=True)
class HashRequest:
    """The inputs of one PHC generation.

    ``password`` and ``salt`` set to ``None`` mean "generate me". An empty
    string is a supplied value and is hashed as-is.
    """

    memory_cost: int = DEFAULT_MEMORY_COST
    time_cost: int = DEFAULT_TIME_COST
    parallelism: int = DEFAULT_PARALLELISM
    output_length: int = DEFAULT_OUTPUT_LENGTH
    password: Optional[str] = field(default=None, repr=False)
    salt: Optional[str] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        password: Optional[str] = None,
        salt: Optional[str] = None,
    ) -> "HashRequest":
        """Build a request from the settings' cost parameters.

        Parameters
        ----------
        settings : Settings
            The settings to take the costs from.
        password : Optional[str]
            The password, None to generate one.
        salt : Optional[str]
            The salt, None to generate one.

        Returns
        -------
        HashRequest
            The request.
        """
        return cls(
            memory_cost=settings.memory_cost,
            time_cost=settings.time_cost,
            parallelism=settings.parallelism,
            output_length=settings.output_length,
            password=password,
            salt=salt,
        )

    @property
    def is_resolved(self) -> bool:
        """Check whether both password and salt are set.

        Returns
        -------
        bool
            True if nothing is left to generate.
        """
        return self.password is not None and self.salt is not None

    def deriver(self) -> KeyDeriver:
        """Get the Argon2id deriver for this request's costs.

        Returns
        -------
        KeyDeriver
            The deriver.
        """
        return Argon2idDeriver(
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_len=self.output_length,
        )


@dataclass(frozen=True)
class PhcResult:
    """The outcome of a PHC generation."""

    password: str
    salt: str
    digest: bytes = field(repr=False)
    phc: str
    identifier: Optional[uuid.UUID] = None

    def lines(self) -> List[str]:
        """Get the labelled output lines.

        Returns
        -------
        List[str]
            One line per value, the identifier first if any.
        """
        rows = []
        if self.identifier is not None:
            rows.append(("uuid", str(self.identifier)))
        rows.extend(
            [
                ("password", self.password),
                ("salt", self.salt),
                ("PHC string", self.phc),
            ]
        )
        return [f"{label:<{LABEL_WIDTH}}: {value}" for label, value in rows]


def resolve_request(
    request: HashRequest,
    password_length: int = DEFAULT_PASSWORD_LENGTH,
    salt_length: int = DEFAULT_SALT_LENGTH,
) -> HashRequest:
    """Fill in a missing password and/or salt with random material.

    Parameters
    ----------
    request : HashRequest
        The request to resolve.
    password_length : int
        Random bytes behind a generated password.
    salt_length : int
        Random bytes behind a generated salt.

    Returns
    -------
    HashRequest
        A new request with both password and salt set.

    Raises
    ------
    RandomSourceError
        If the random source fails.
    """
    if request.is_resolved:
        return request
    salt = request.salt
    if salt is None:
        LOG.info("Generating a random salt (%d bytes)", salt_length)
        salt = generate_material(salt_length)
    password = request.password
    if password is None:
        LOG.info("Generating a random password (%d bytes)", password_length)
        password = generate_material(password_length)
    return dataclasses.replace(request, password=password, salt=salt)


def new_identifier() -> uuid.UUID:
    """Generate a random (version 4) identifier.

    Returns
    -------
    uuid.UUID
        The identifier.

    Raises
    ------
    RandomSourceError
        If the random source fails.
    """
    try:
        return uuid.uuid4()
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(
            f"Could not generate an identifier: {exc}"
        ) from exc


def generate_phc(
    request: HashRequest,
    password_length: int = DEFAULT_PASSWORD_LENGTH,
    salt_length: int = DEFAULT_SALT_LENGTH,
    with_identifier: bool = False,
) -> PhcResult:
    """Resolve the request, derive the Argon2id key and format it.

    Parameters
    ----------
    request : HashRequest
        The request, password and salt may be unset.
    password_length : int
        Random bytes behind a generated password.
    salt_length : int
        Random bytes behind a generated salt.
    with_identifier : bool
        Whether to also generate a random identifier.

    Returns
    -------
    PhcResult
        The resolved values and the PHC string.

    Raises
    ------
    RandomSourceError
        If the random source fails.
    DerivationError
        If Argon2id rejects the parameters.
    """
    identifier = new_identifier() if with_identifier else None
    resolved = resolve_request(
        request, password_length=password_length, salt_length=salt_length
    )
    # resolve_request never leaves these unset
    password = str(resolved.password)
    salt = str(resolved.salt)
    # the bytes given on the command line, even when not valid UTF-8
    salt_bytes = os.fsencode(salt)
    digest = resolved.deriver().derive(os.fsencode(password), salt_bytes)
    phc = format_phc(
        salt_bytes,
        digest,
        memory_cost=resolved.memory_cost,
        time_cost=resolved.time_cost,
        parallelism=resolved.parallelism,
    )
    return PhcResult(
        password=password,
        salt=salt,
        digest=digest,
        phc=phc,
        identifier=identifier,
    )


__all__ = [
    "HashRequest",
    "PhcResult",
    "generate_phc",
    "new_identifier",
    "resolve_request",
]
