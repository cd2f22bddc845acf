"""Parser for the repeatable ``-L NAME=LEVEL`` CLI option.

Values may be given one pair per flag, or as a single comma/space separated
string (as read from the ``STOREFRONT_LOGGER_LEVEL`` environment variable).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten the option value into a list of non-empty ``NAME=LEVEL`` items."""
    if value is None:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` pairs into a name → level mapping.

    Starts from `DEFAULT_LIB_LEVELS`; later pairs override earlier ones. Level
    names are case-insensitive standard logging names (DEBUG, INFO, ...).

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or the level is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
