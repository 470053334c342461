"""clibkit CLI entry point.

Defines the top-level ``clibkit`` command (via Click-Extra), configures
logging from the global options, and registers the subcommands.

Available commands
- ``clibkit join|concat|path``: join fragments.
- ``clibkit colors|color``: terminal colors.
- ``clibkit env get``: read environment variables.
- ``clibkit file cat|copy|move|rm``: file wrappers.

Examples
    $ clibkit --version
    $ clibkit join , a b c
    $ clibkit -v file copy notes.txt backup.txt
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from clibkit import __version__, config
from clibkit.ansi import hyperlink
from clibkit.logging import config_console_handler, config_flight_recorder, log_startup
from clibkit.strings import collect_from, join

from .env import env as env_group
from .files import file_group
from .helpers import parse_log_level
from .text import COMMANDS as TEXT_COMMANDS

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """clibkit command-line interface.

    Join text fragments, print terminal colors, and run small environment and
    file operations from the shell. Output goes to stdout; diagnostics and
    logs go to stderr.
    """


EPILOG = "\b\n" + join(
    "\n",
    collect_from(
        [
            click.style("See Also:", fg="blue", bold=True, underline=True),
            "  Issues: " + hyperlink("https://github.com/clibkit/clibkit/issues"),
        ]
    ),
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
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
    help="Path to the flight-recorder log file.",
    default=None,
    envvar=config.LOG_PATH_ENV_VAR,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar=config.FLIGHT_RECORDER_CAPACITY_ENV_VAR,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on exit if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENV_VAR,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L clibkit.files=DEBUG) "
        "or via CLIBKIT_LOGGER_LEVELS (comma/space list)."
    ),
    show_envvar=True,
)
@clickx.pass_context
def clibkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """clibkit command-line interface."""

    # 0) effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        log_path = log_path or config.default_log_path()
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger; handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for _command in TEXT_COMMANDS:
    clibkit.add_command(_command)
clibkit.add_command(env_group)
clibkit.add_command(file_group)
