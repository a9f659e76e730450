# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""phc-generator settings module."""

from typing import List

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ..errors import SettingsError
from ._hashing import (
    DEFAULT_MEMORY_COST,
    DEFAULT_OUTPUT_LENGTH,
    DEFAULT_PARALLELISM,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_SALT_LENGTH,
    DEFAULT_SHOW_UUID,
    DEFAULT_TIME_COST,
)

ENV_PREFIX = "PHC_GENERATOR_"

UInt = Annotated[int, Field(ge=0)]
"""Unsigned integer; range checks beyond this are left to Argon2id."""


class Settings(BaseSettings):
    """Settings class.

    Holds the defaults the command line falls back to. Values are only
    coerced to unsigned integers here: out-of-range costs are passed
    through so that the Argon2id primitive reports them.
    """

    memory_cost: UInt = DEFAULT_MEMORY_COST
    time_cost: UInt = DEFAULT_TIME_COST
    parallelism: UInt = DEFAULT_PARALLELISM
    output_length: UInt = DEFAULT_OUTPUT_LENGTH
    # Generated material (random bytes, before base64 encoding)
    password_length: UInt = DEFAULT_PASSWORD_LENGTH
    salt_length: UInt = DEFAULT_SALT_LENGTH
    show_uuid: bool = DEFAULT_SHOW_UUID

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings from the environment.

        Returns
        -------
        Settings
            The settings instance

        Raises
        ------
        SettingsError
            If an environment variable holds an invalid value.
        """
        try:
            return cls()
        except ValidationError as exc:
            raise SettingsError(describe_env_errors(exc)) from exc


def describe_env_errors(error: ValidationError) -> str:
    """Name the environment variables that failed validation.

    Parameters
    ----------
    error : ValidationError
        The error raised while reading the environment.

    Returns
    -------
    str
        One ``NAME='value': reason`` entry per invalid variable.
    """
    entries: List[str] = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        entries.append(
            f"{ENV_PREFIX}{field.upper()}={detail.get('input')!r}: "
            f"{detail['msg']}"
        )
    return "; ".join(entries)
