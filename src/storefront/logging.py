"""Logging helpers used by the Storefront CLI.

This module configures console logging with Rich and an in-memory
"flight recorder" that buffers log records and writes them to disk when
something goes wrong. Records from third-party loggers get a short prefix on
the console so they are easy to tell apart from the shop's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from storefront.config import RuleSettings

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "storefront"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to "[package]" for loggers outside storefront.

    Storefront's own records get an empty prefix. Every record passes.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    In debug mode the handler logs at DEBUG and shows the source file and
    line of every record; otherwise third-party records get a short prefix.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Enable debug formatting (paths and timestamps).
        color: Enable color output.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    # follows click-extra's --color / --no-color
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        handler = RichHandler(
            level=logging.DEBUG,
            console=console,
            rich_tracebacks=True,
            show_time=False,
            show_path=True,
            enable_link_path=True,
        )
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
        return handler

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a MemoryHandler that spills into *path*.

    The recorder buffers up to `capacity` records and writes them to *path*
    when a record at `flush_level` or above arrives (or on close when
    `flush_on_close` is set).

    Args:
        path: Destination file for flushed records.
        capacity: Number of records kept in memory.
        flush_level: Level that triggers a flush.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory handler targeting a FileHandler.
    """
    # delay=True: the file is only created if something is flushed to it
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s "
            "%(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    capacity: int,
    flight_recorder: bool,
    logger_levels: dict[str, int],
    force_flush: bool = False,
    settings: RuleSettings | None = None,
) -> None:
    """Log a one-line startup summary and DEBUG-level diagnostics.

    Args:
        logger: Logger used to emit the messages.
        app_version: Application version string.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder file, or None.
        capacity: Flight-recorder buffer size.
        flight_recorder: Whether the flight recorder is enabled.
        logger_levels: Per-logger level overrides.
        force_flush: Whether the flight recorder flushes on exit.
        settings: Active rule settings, if already loaded.
    """
    logger.info(
        "STOREFRONT %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", version("click"))
    logger.debug("Rich: %s", version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            capacity,
            force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
    if settings is not None:
        logger.debug(
            "Rules: base_currency=%s, hours=%s-%s, coupons=%s",
            settings.base_currency,
            settings.business_hours.opens.strftime("%H:%M"),
            settings.business_hours.closes.strftime("%H:%M"),
            [c.code for c in settings.coupons],
        )
