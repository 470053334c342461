"""ANSI terminal styling.

Escape-sequence constants, 256-color codes built with `concat`, a printable
color table, and OSC-8 hyperlinks with a plain-text fallback. Everything here
returns plain strings; only `print_color_table` and `clear_screen` write to
the terminal.
"""

import os
import sys
from typing import TextIO

import click

from clibkit.strings import collect_from, concat, join

ESC = "\x1b"

RESET = concat(ESC, "[0;39m")
BOLD = concat(ESC, "[1m")
UNDERLINE = concat(ESC, "[4m")
ITALIC = concat(ESC, "[3m")
CLEAR = concat(ESC, "[2J")
ERASE_LINE = concat(ESC, "[2K")
HIDE_CURSOR = concat(ESC, "[?25l")
SHOW_CURSOR = concat(ESC, "[?25h")

COLOR_COUNT = 256
TABLE_ROW_LENGTH = 21


def color(code: int, background: bool = False) -> str:
    """Return the 256-color escape sequence for ``code``.

    Args:
        code: Palette index, 0 to 255.
        background: Color the background instead of the foreground.

    Returns:
        str: ``ESC[38;5;<code>m`` (foreground) or ``ESC[48;5;<code>m``
        (background); an empty string when ``code`` is out of range.
    """
    if code < 0 or code >= COLOR_COUNT:
        return ""
    where = "4" if background else "3"
    return concat(ESC, "[", where, "8;5;", str(code), "m")


def color_fg(code: int) -> str:
    """Foreground form of `color`."""
    return color(code, background=False)


def color_bg(code: int) -> str:
    """Background form of `color`."""
    return color(code, background=True)


def styled(text: str, *codes: str) -> str:
    """Wrap ``text`` in the given escape ``codes`` followed by `RESET`.

    Example:
        ``styled("Blue and italic", color_fg(25), ITALIC)``
    """
    return concat(*codes, text, RESET)


def color_table() -> str:
    """Render all 256 palette entries, 21 per row, each in its own color."""
    entries = []
    for i in range(COLOR_COUNT):
        if i % TABLE_ROW_LENGTH == 0:
            entries.append("\n")
        entries.append(f"{color(i)}{i:>3} ")
    entries.append(RESET)
    entries.append("\n")
    return join("", collect_from(entries))


def print_color_table(file: TextIO | None = None) -> None:
    """Echo `color_table` to ``file`` (stdout by default)."""
    click.echo(color_table(), file=file, nl=False, color=True)


def clear_screen() -> None:
    """Clear the terminal."""
    click.clear()


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` if hyperlinks should be emitted; ``False`` otherwise.

    Notes:
        - Returns ``False`` when the stream is not a TTY (e.g., piped or redirected).
        - Uses an allowlist of terminal identifiers (VS Code, iTerm2, WezTerm,
          Kitty, Windows Terminal, VTE-based terminals, Alacritty, Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program
        in {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, text: str | None = None, stream: TextIO | None = None) -> str:
    """Render ``url`` as an OSC-8 hyperlink, or as plain text when unsupported.

    Args:
        url: Target URL.
        text: Visible label; defaults to the URL itself.
        stream: Stream the link will be written to (see `supports_osc8`).

    Returns:
        str: The OSC-8 sequence (BEL-terminated) or the plain label.
    """
    label = text or url
    if not supports_osc8(stream):
        return label
    return concat(ESC, "]8;;", url, "\x07", label, ESC, "]8;;", "\x07")
