"""Fixtures for end-to-end tests of the `storefront` command.

Provides a test-only `log-demo` command that emits one message per level,
a fixture that registers it on the top-level group for the duration of a
test, a CliRunner, and an isolated working directory.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from storefront.entrypoints.cli.main import storefront

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on 'storefront.demo' and a third-party logger."""
    logger = logging.getLogger("storefront.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    vendor = logging.getLogger("some.vendor")
    vendor.debug("vendor debug message")
    vendor.info("vendor info message")
    vendor.warning("vendor warning message")
    logger.debug("demo trailing debug message")


def _unregister(group: click.Group, name: str) -> None:
    """Drop *name* from the group and from any click-extra help sections."""
    group.commands.pop(name, None)
    default_section = getattr(group, "_default_section", None)
    if default_section is not None:
        default_section.commands.pop(name, None)
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make `storefront log-demo` available while the test runs."""
    storefront.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(storefront, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking the CLI."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a throwaway working directory."""
    with runner.isolated_filesystem():
        yield
