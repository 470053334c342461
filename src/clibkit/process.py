"""Child-process helpers.

`run_command` runs a program (never through a shell) and turns a missing
executable or a non-zero exit status into `clibkit.errors` exceptions.
"""

import logging
import subprocess
from collections.abc import Sequence

from clibkit.errors import CommandFailedError, CommandNotFoundError
from clibkit.strings import collect_from, join

logger = logging.getLogger(__name__)


def command_line(args: Sequence[str]) -> str:
    """Render ``args`` as a single space-separated line for diagnostics."""
    return join(" ", collect_from(args))


def run_command(*args: str, capture: bool = False) -> subprocess.CompletedProcess[str]:
    """Run a command and wait for it to finish.

    Args:
        *args: Program followed by its arguments.
        capture: Capture stdout/stderr as text instead of inheriting them.

    Returns:
        subprocess.CompletedProcess[str]: The finished process.

    Raises:
        ValueError: If no program is given.
        CommandNotFoundError: If the program cannot be found.
        CommandFailedError: If the program exits with a non-zero status.
    """
    if not args:
        raise ValueError("run_command() needs at least a program name")

    line = command_line(args)
    logger.debug("Running: %s", line)
    try:
        result = subprocess.run(  # pylint: disable=subprocess-run-check
            list(args), capture_output=capture, text=True
        )
    except FileNotFoundError as e:
        raise CommandNotFoundError(args[0]) from e

    if result.returncode != 0:
        raise CommandFailedError(line, result.returncode)
    return result


def capture_output(*args: str) -> str:
    """Run a command and return what it wrote to stdout."""
    return run_command(*args, capture=True).stdout
