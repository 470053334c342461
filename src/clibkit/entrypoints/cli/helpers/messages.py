"""Terminal message helpers for the clibkit CLI.

Each message is a single bold, colored line on **stderr** so stdout stays free
for the text a command produces (joined strings, file contents ...). Glyphs
fall back to ASCII when stderr cannot encode the emoji.
"""

from enum import Enum

import click

from clibkit.strings import join_all


class Glyph(Enum):
    """Line markers as ``(emoji, ascii_fallback)`` pairs."""

    CAUTION = ("⚠️", "[!]")  # pragma: no mutate
    SUCCESS = ("✅", "[OK]")  # pragma: no mutate
    ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call; its encoding can change between
    calls (tests, redirected output).
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: Glyph) -> str:
    """Return the emoji for ``kind`` when stderr supports it, else its ASCII form."""
    emoji, fallback = kind.value
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: Glyph, msg: str, fg: str) -> None:
    click.secho(join_all("  ", glyph(kind), msg), fg=fg, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr, e.g. ``⚠️  File exists``."""
    _emit(Glyph.CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr, e.g. ``✅  Copied a to b``."""
    _emit(Glyph.SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr, e.g. ``❌  Could not read x``."""
    _emit(Glyph.ERROR, msg, "red")
