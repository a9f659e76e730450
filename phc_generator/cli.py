# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: skip-file
import logging
import logging.config
import os
from typing import Any, Optional

import click
import typer

from phc_generator._logging import LogLevel, get_log_level, get_logging_config
from phc_generator._version import __version__
from phc_generator.config import Settings
from phc_generator.errors import PhcGeneratorError, SettingsError
from phc_generator.generator import HashRequest, generate_phc

APP_NAME = "phc-generator"
APP_HELP = (
    "Generates a PHC string (argon2id). "
    "The password and salt are random if not given."
)


class UnsignedInt(click.ParamType):
    """An integer >= 0, also accepted in the ``-m=19456`` form."""

    name = "integer"

    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter],
        ctx: Optional[click.Context],
    ) -> int:
        """Convert the value to an unsigned integer.

        Parameters
        ----------
        value : Any
            The raw value.
        param : Optional[click.Parameter]
            The parameter being converted.
        ctx : Optional[click.Context]
            The click context.

        Returns
        -------
        int
            The integer.
        """
        if isinstance(value, int):
            return value
        # a short option written as -m=N reaches us as "=N"
        text = str(value).removeprefix("=")
        try:
            number = int(text)
        except ValueError:
            self.fail(f"{value!r} is not a valid integer.", param, ctx)
        if number < 0:
            self.fail(f"{number} is not in the range x>=0.", param, ctx)
        return number


UINT = UnsignedInt()

try:
    DEFAULT_SETTINGS = Settings.load()
    SETTINGS_ERROR: Optional[SettingsError] = None
except SettingsError as settings_error:
    DEFAULT_SETTINGS = Settings.model_construct()
    SETTINGS_ERROR = settings_error

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_short=True,
)


@app.command(help=APP_HELP)
def generate(
    memory_cost: int = typer.Option(
        DEFAULT_SETTINGS.memory_cost,
        "--memory-cost",
        "-m",
        click_type=UINT,
        help="[m]emory cost in KiB",
    ),
    time_cost: int = typer.Option(
        DEFAULT_SETTINGS.time_cost,
        "--time-cost",
        "-t",
        click_type=UINT,
        help="i[t]erations",
    ),
    parallelism: int = typer.Option(
        DEFAULT_SETTINGS.parallelism,
        "--parallelism",
        "-p",
        click_type=UINT,
        help="[p]arallelism",
    ),
    output_length: int = typer.Option(
        DEFAULT_SETTINGS.output_length,
        "--output-length",
        "-l",
        click_type=UINT,
        help="output [l]ength in bytes",
    ),
    password: Optional[str] = typer.Option(
        None,
        "--password",
        "-password",
        help="The password (optional, random if not given)",
        show_default=False,
    ),
    salt: Optional[str] = typer.Option(
        None,
        "--salt",
        "-salt",
        help="The salt (optional, random if not given)",
        show_default=False,
    ),
    password_length: int = typer.Option(
        DEFAULT_SETTINGS.password_length,
        "--password-length",
        click_type=UINT,
        help="Random bytes behind a generated password",
    ),
    salt_length: int = typer.Option(
        DEFAULT_SETTINGS.salt_length,
        "--salt-length",
        click_type=UINT,
        help="Random bytes behind a generated salt",
    ),
    show_uuid: bool = typer.Option(
        DEFAULT_SETTINGS.show_uuid,
        "--uuid/--no-uuid",
        help="Also print a random identifier",
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Generate a PHC string."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    if SETTINGS_ERROR is not None:
        raise click.UsageError(f"Invalid environment: {SETTINGS_ERROR}")
    logging.config.dictConfig(get_logging_config(log_level.value))
    logger = logging.getLogger(__name__)
    settings = DEFAULT_SETTINGS.model_copy(
        update={
            "memory_cost": memory_cost,
            "time_cost": time_cost,
            "parallelism": parallelism,
            "output_length": output_length,
        }
    )
    request = HashRequest.from_settings(settings, password=password, salt=salt)
    logger.debug("Effective request: %s", request)
    try:
        result = generate_phc(
            request,
            password_length=password_length,
            salt_length=salt_length,
            with_identifier=show_uuid,
        )
    except PhcGeneratorError as error:
        logger.debug("Could not generate the PHC string", exc_info=True)
        typer.secho(f"Error: {error}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from error
    for line in result.lines():
        # as bytes, so that non UTF-8 input is echoed back unchanged
        typer.echo(os.fsencode(line))


if __name__ == "__main__":
    app()
