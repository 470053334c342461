"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, plus fixtures to register it, obtain a CliRunner, and run each test in
an isolated filesystem with the flight recorder writing inside it.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from clibkit import config
from clibkit.entrypoints.cli.main import clibkit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages on a project and a third-party logger."""
    logger = logging.getLogger("clibkit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    clibkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(clibkit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner, monkeypatch):
    """Run inside an isolated directory; the flight recorder writes there too."""
    with runner.isolated_filesystem():
        monkeypatch.setenv(config.LOG_PATH_ENV_VAR, "latest.log")
        yield
