# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc
"""Test phc_generator.config.settings.*."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from phc_generator.config import ENV_PREFIX, Settings
from phc_generator.errors import PhcGeneratorError, SettingsError


def test_default_settings_load() -> None:
    """Ensure default settings are loaded properly."""
    settings = Settings.load()
    assert settings.memory_cost == 19456
    assert settings.time_cost == 2
    assert settings.parallelism == 1
    assert settings.output_length == 32
    assert settings.password_length == 64
    assert settings.salt_length == 16
    assert settings.show_uuid is True


@patch.dict(
    os.environ,
    {
        f"{ENV_PREFIX}MEMORY_COST": "65536",
        f"{ENV_PREFIX}TIME_COST": "3",
        f"{ENV_PREFIX}PARALLELISM": "4",
        f"{ENV_PREFIX}OUTPUT_LENGTH": "64",
        f"{ENV_PREFIX}PASSWORD_LENGTH": "32",
        f"{ENV_PREFIX}SALT_LENGTH": "24",
        f"{ENV_PREFIX}SHOW_UUID": "false",
    },
)
def test_env_override() -> None:
    """Ensure environment variables override default settings."""
    settings = Settings.load()
    assert settings.memory_cost == 65536
    assert settings.time_cost == 3
    assert settings.parallelism == 4
    assert settings.output_length == 64
    assert settings.password_length == 32
    assert settings.salt_length == 24
    assert settings.show_uuid is False


@patch.dict(os.environ, {f"{ENV_PREFIX}MEMORY_COST": ""})
def test_empty_env_ignored() -> None:
    """Ensure empty environment variables are ignored."""
    assert Settings.load().memory_cost == 19456


@patch.dict(os.environ, {f"{ENV_PREFIX}LOG_LEVEL": "verbose"})
def test_log_level_env_not_validated_here() -> None:
    """Test that the log level is left to the logging setup."""
    assert Settings.load().memory_cost == 19456


@pytest.mark.parametrize(
    "field", ["memory_cost", "time_cost", "parallelism", "output_length"]
)
def test_negative_values_rejected(field: str) -> None:
    """Test that costs must be unsigned."""
    with pytest.raises(ValidationError):
        Settings(**{field: -1})


def test_out_of_range_values_pass_through() -> None:
    """Test that argon2's own limits are not checked here."""
    settings = Settings(memory_cost=1, time_cost=0, parallelism=0)
    assert settings.memory_cost == 1
    assert settings.time_cost == 0
    assert settings.parallelism == 0


@pytest.mark.parametrize(
    "key,value",
    [
        ("MEMORY_COST", "abc"),
        ("TIME_COST", "-1"),
        ("SHOW_UUID", "maybe"),
    ],
)
def test_invalid_env_value(key: str, value: str) -> None:
    """Test that an invalid env value names the variable."""
    with patch.dict(os.environ, {f"{ENV_PREFIX}{key}": value}):
        with pytest.raises(SettingsError) as exc_info:
            Settings.load()
    assert f"{ENV_PREFIX}{key}='{value}'" in str(exc_info.value)
    assert isinstance(exc_info.value, PhcGeneratorError)
    assert isinstance(exc_info.value.__cause__, ValidationError)
