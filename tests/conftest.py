# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import logging
import os
import sys
from collections.abc import Generator

import pytest

from phc_generator.config import Settings
from phc_generator.generator import HashRequest

ENV_KEY_PREFIX = "PHC_GENERATOR_"

# m=19456, t=2, p=1, l=32, password="test", salt="saltsalt"
GOLDEN_PHC = (
    "$argon2id$v=19$m=19456,t=2,p=1"
    "$c2FsdHNhbHQ$GsorJgzkom9CX+5gltbpDyUKhzfT5cKw2Z+cQfhmTZ8"
)


@pytest.fixture(scope="function", autouse=True)
def reset_env_and_args() -> Generator[None, None, None]:
    """Clear prefixed env vars and command line args before each test."""
    saved_env = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_KEY_PREFIX)
    }
    for key in saved_env:
        os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = [sys.argv[0]]
    yield
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved_env)
    # the cli configures logging with handlers bound to the runner's streams
    for name in ("", "phc_generator"):
        logging.getLogger(name).handlers.clear()


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Settings with the built-in defaults."""
    return Settings()


@pytest.fixture(name="golden_request")
def golden_request_fixture() -> HashRequest:
    """The request behind GOLDEN_PHC."""
    return HashRequest(
        memory_cost=19456,
        time_cost=2,
        parallelism=1,
        output_length=32,
        password="test",
        salt="saltsalt",
    )


@pytest.fixture(name="golden_phc")
def golden_phc_fixture() -> str:
    """The PHC string of golden_request."""
    return GOLDEN_PHC
