"""Logging helpers used by clibkit and its CLI.

Two kinds of output live here:

- Labelled lines (``[INFO] message``, ``[WARN] message`` ...) written by
  `info`, `warn`, `erro`, `debu`, `panic` and `demo` through the
  ``clibkit.log`` logger. `LabelStreamHandler` sends INFO lines to stdout and
  everything else to stderr. Nothing is labelled until
  `install_label_handler` has been called: before that, records fall through
  to whatever handlers the root logger has (or to logging's last-resort
  handler, which prints WARNING and above to stderr without a label).
- The CLI's console logging with Rich, plus an in-memory "flight recorder"
  that buffers log records and writes them to disk on flush. A filter
  annotates third-party records with a short prefix used by console
  formatting.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from enum import Enum
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, NoReturn, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from clibkit import config
from clibkit.strings import collect_from, concat, join

if TYPE_CHECKING:
    from collections.abc import Callable
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "clibkit"
LOGGER_NAME = "clibkit.log"

_log = logging.getLogger(LOGGER_NAME)


# ============================================================================
#                               Labelled output
# ============================================================================


class LogLabel(Enum):
    """Short labels printed in front of each line, keyed by logging level."""

    DEBU = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERRO = logging.ERROR
    PANIC = logging.CRITICAL

    @classmethod
    def for_level(cls, levelno: int) -> LogLabel:
        """Return the label of the highest level not above ``levelno``."""
        label = cls.DEBU
        for candidate in cls:
            if candidate.value <= levelno:
                label = candidate
        return label


class LabelFormatter(logging.Formatter):
    """Render records as ``[LABEL] message``.

    A record may carry an explicit ``label`` attribute (see `demo`); otherwise
    the label is derived from its level.
    """

    def format(self, record: logging.LogRecord) -> str:
        label = getattr(record, "label", None) or LogLabel.for_level(record.levelno).name
        text = concat("[", label, "] ", record.getMessage())
        if record.exc_info:
            text = join("\n", collect_from([text, self.formatException(record.exc_info)]))
        return text


class LabelStreamHandler(logging.Handler):
    """Write labelled lines: INFO to stdout, every other level to stderr.

    Streams are looked up on each emit so redirected ``sys.stdout`` /
    ``sys.stderr`` are honoured.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.setFormatter(LabelFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            stream = sys.stdout if record.levelno == logging.INFO else sys.stderr
            stream.write(concat(line, "\n"))
            stream.flush()
        except Exception:  # pylint: disable=broad-except
            self.handleError(record)


def install_label_handler(level: int = logging.DEBUG) -> LabelStreamHandler:
    """Attach a `LabelStreamHandler` to the ``clibkit.log`` logger.

    Calling it again returns the handler already installed. Records stop
    propagating to the root logger so lines are not printed twice.

    Args:
        level: Minimum level for the ``clibkit.log`` logger.

    Returns:
        LabelStreamHandler: The installed handler.
    """
    for handler in _log.handlers:
        if isinstance(handler, LabelStreamHandler):
            return handler
    handler = LabelStreamHandler()
    _log.addHandler(handler)
    _log.setLevel(level)
    _log.propagate = False
    return handler


def info(msg: str, *args: object) -> None:
    """Log an ``[INFO]`` line.

    Prints to stdout only once `install_label_handler` has been called.
    """
    _log.info(msg, *args, stacklevel=2)


def warn(msg: str, *args: object) -> None:
    """Log a ``[WARN]`` line."""
    _log.warning(msg, *args, stacklevel=2)


def erro(msg: str, *args: object) -> None:
    """Log an ``[ERRO]`` line."""
    _log.error(msg, *args, stacklevel=2)


def debu(msg: str, *args: object) -> None:
    """Log a ``[DEBU]`` line, only when `config.debug_enabled` is true."""
    if config.debug_enabled():
        _log.debug(msg, *args, stacklevel=2)


def panic(msg: str, *args: object) -> NoReturn:
    """Log a ``[PANIC]`` line and exit with status 1.

    Raises:
        SystemExit: Always, with code 1.
    """
    _log.critical(msg, *args, stacklevel=2)
    raise SystemExit(1)


def demo(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Log a ``[DEMO]`` line describing the call, then make it.

    Example:
        ``demo(print_color_table)`` logs ``[DEMO] print_color_table()``.
    """
    arguments = [repr(a) for a in args]
    arguments.extend(f"{k}={v!r}" for k, v in kwargs.items())
    name = getattr(func, "__name__", repr(func))
    call = concat(name, "(", join(", ", collect_from(arguments)), ")")
    _log.info("%s", call, extra={"label": "DEMO"}, stacklevel=2)
    return func(*args, **kwargs)


# ============================================================================
#                               CLI console logging
# ============================================================================


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside clibkit with their top-level package.

    Sets ``record.prefix`` to ``"[click_extra]"``, ``"[rich]"`` and so on, or
    to ``""`` for ``clibkit.*`` loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = concat("[", record.name.split(".")[0], "]")
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich stderr handler used by the ``clibkit`` command.

    Args:
        level: Threshold derived from ``-v``/``-q``.
        debug_mode: ``--debug``: force DEBUG and show source locations and
            logger names instead of third-party prefixes.
        color: False when click-extra's ``--no-color`` is in effect.
    """

    # Same choices as click-extra --color
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer every record in memory and dump it to ``path`` when needed.

    The buffer is written out when it holds ``capacity`` records, when a
    record at ``flush_level`` arrives, or at shutdown with ``flush_on_close``
    (``--force-flush``). ``path`` is opened only on the first write, so a
    quiet run leaves no log file behind.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
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
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Record how the ``clibkit`` command configured its logging.

    One INFO summary line, then DEBUG lines with interpreter, platform and
    library versions and the effective handler and ``-L`` settings. The DEBUG
    lines bypass ``-v``/``-q`` only through the flight recorder.
    """

    logger.info(
        "CLIBKIT %s: console=%s, flight-recorder=%s",
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
            flight_capacity,
            force_flush_fr,
        )
    overrides = [
        concat(name, "=", logging.getLevelName(lvl)) for name, lvl in logger_levels.items()
    ]
    logger.debug("Per-logger overrides: %s", join(", ", collect_from(overrides)) or "<none>")
