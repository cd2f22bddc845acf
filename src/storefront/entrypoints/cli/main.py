"""Storefront CLI entry point.

Defines the top-level ``storefront`` command (via Click-Extra), configures
logging, builds the application container and registers the rule commands.

Examples
    $ storefront --version
    $ storefront discount 10 SAVE10
    $ storefront validate-user alfred 19
    $ storefront -v online --at "2025-09-15 08:01"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from storefront import __version__
from storefront.bootstrap import bootstrap
from storefront.config import InvalidSettingError
from storefront.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .commands import COMMANDS
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """STOREFRONT command-line interface.

    Evaluate the shop's pricing and eligibility rules from the terminal:
    apply coupon codes, validate sign-up input, check driving eligibility,
    opening hours, holiday discounts, currency conversion and shipping.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("storefront", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="STOREFRONT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    "capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="STOREFRONT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last DEBUG-level log records in memory and write them to "
        "--log-path when a WARNING or ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help=(
        "Write the whole flight recorder buffer to --log-path on exit, even "
        "when nothing at WARNING or above was logged."
    ),
    default=False,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of a specific logger (NAME=LEVEL). Repeatable, "
        "or via STOREFRONT_LOGGER_LEVEL (comma/space list)."
    ),
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def storefront(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """STOREFRONT command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    try:
        container = bootstrap()
    except InvalidSettingError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = container

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        capacity=capacity,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
        force_flush=force_flush,
        settings=container.settings,
    )

    ctx.call_on_close(logging.shutdown)


for command in COMMANDS:
    storefront.add_command(command)
