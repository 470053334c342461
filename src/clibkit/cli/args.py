"""Command-line argument helpers.

`shift_args` pops arguments off the front of an argv list. `CliArguments`
describes a program's options once and renders them as a getopt-style
format string, a help screen, or a list of ``click.Option`` objects.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

import click

from clibkit.errors import NoArgumentsError
from clibkit.strings import collect_from, concat, join


def shift_args(argv: Sequence[str]) -> tuple[str, list[str]]:
    """Split ``argv`` into its first argument and the rest.

    Example:
        ``program, rest = shift_args(sys.argv)``

    Raises:
        NoArgumentsError: If ``argv`` is empty.
    """
    if not argv:
        raise NoArgumentsError
    return argv[0], list(argv[1:])


class ArgumentKind(Enum):
    """Whether an option takes a value."""

    NONE = ""
    OPTIONAL = "::"
    REQUIRED = ":"


@dataclass(frozen=True)
class Argument:
    """A single command-line option.

    Attributes:
        short: One-character short name, used as ``-<short>``.
        long: Optional long name, used as ``--<long>``.
        description: Help text.
        kind: Whether the option takes a value.
    """

    short: str
    long: str | None
    description: str
    kind: ArgumentKind = ArgumentKind.NONE

    def __post_init__(self) -> None:
        if len(self.short) != 1 or not self.short.isalnum():
            raise ValueError(f"Short option must be one letter or digit, got {self.short!r}")
        if self.long is not None and (not self.long or self.long.startswith("-")):
            raise ValueError(f"Invalid long option name: {self.long!r}")

    @property
    def flags(self) -> list[str]:
        """The option strings, short first: ``["-f", "--file"]``."""
        flags = [concat("-", self.short)]
        if self.long:
            flags.append(concat("--", self.long))
        return flags

    @property
    def signature(self) -> str:
        """Flags as shown in help, e.g. ``-f, --file <arg>`` or ``-v, --version [arg]``."""
        text = join(", ", collect_from(self.flags))
        if self.kind is ArgumentKind.REQUIRED:
            return concat(text, " <arg>")
        if self.kind is ArgumentKind.OPTIONAL:
            return concat(text, " [arg]")
        return text

    def click_option(self) -> click.Option:
        """Build the equivalent ``click.Option``."""
        if self.kind is ArgumentKind.NONE:
            return click.Option(self.flags, is_flag=True, help=self.description)
        if self.kind is ArgumentKind.OPTIONAL:
            # bare flag gives "", absent gives None
            return click.Option(
                self.flags, is_flag=False, flag_value="", default=None, help=self.description
            )
        return click.Option(self.flags, type=str, help=self.description)


@dataclass
class CliArguments:
    """An ordered set of `Argument` definitions."""

    arguments: list[Argument] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of arguments defined."""
        return len(self.arguments)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self.arguments)

    def add(self, argument: Argument) -> None:
        """Append ``argument``.

        Raises:
            ValueError: If its short or long name is already taken.
        """
        for existing in self.arguments:
            if existing.short == argument.short:
                raise ValueError(f"Duplicate short option: -{argument.short}")
            if argument.long and existing.long == argument.long:
                raise ValueError(f"Duplicate long option: --{argument.long}")
        self.arguments.append(argument)

    def format_string(self) -> str:
        """Return the getopt short-option string, e.g. ``"hv::f:"``."""
        return join("", collect_from(a.short + a.kind.value for a in self.arguments))

    def long_options(self) -> list[str]:
        """Return getopt long-option names, ``=`` suffixed when a value is taken."""
        return [
            a.long if a.kind is ArgumentKind.NONE else concat(a.long, "=")
            for a in self.arguments
            if a.long
        ]

    def help_text(self, usage: str, footer: str | None = None) -> str:
        """Render a help screen.

        Args:
            usage: Text shown after ``Usage:``.
            footer: Optional closing line (e.g. an author note).

        Returns:
            str: The help screen, ending with a newline.
        """
        width = max((len(a.signature) for a in self.arguments), default=0)
        lines = [concat("Usage: ", usage), ""]
        if self.arguments:
            lines.append("Options:")
            lines.extend(
                concat("  ", a.signature.ljust(width), "  ", a.description)
                for a in self.arguments
            )
        if footer:
            lines.extend(["", footer])
        lines.append("")
        return join("\n", collect_from(lines))

    def click_params(self) -> list[click.Option]:
        """Return every argument as a ``click.Option``."""
        return [a.click_option() for a in self.arguments]
