"""Text commands: joining fragments and terminal colors.

``join``, ``concat`` and ``path`` print their result to stdout followed by a
newline, so they compose with shell pipelines:

    $ clibkit join - a b c
    a-b-c
    $ clibkit path usr local bin
    usr/local/bin
"""

import logging

import click

from clibkit import ansi
from clibkit.strings import collect, concat, join, path

logger = logging.getLogger(__name__)


@click.command(name="join")
@click.argument("separator")
@click.argument("fragments", nargs=-1)
def join_cmd(separator: str, fragments: tuple[str, ...]) -> None:
    """Join FRAGMENTS with SEPARATOR."""
    table = collect(*fragments)
    logger.debug("Joining %d fragments with %r", table.count, separator)
    click.echo(join(separator, table))


@click.command(name="concat")
@click.argument("fragments", nargs=-1)
def concat_cmd(fragments: tuple[str, ...]) -> None:
    """Concatenate FRAGMENTS with no separator."""
    click.echo(concat(*fragments))


@click.command(name="path")
@click.argument("fragments", nargs=-1)
def path_cmd(fragments: tuple[str, ...]) -> None:
    """Join FRAGMENTS with the platform path separator."""
    click.echo(path(*fragments))


@click.command()
def colors() -> None:
    """Print the 256-color palette."""
    ansi.print_color_table()


@click.command()
@click.argument("code", type=click.IntRange(0, ansi.COLOR_COUNT - 1))
@click.argument("text")
@click.option("--bg", "background", is_flag=True, help="Color the background.")
@click.option("--bold", is_flag=True, help="Also make the text bold.")
@click.option("--italic", is_flag=True, help="Also make the text italic.")
@click.option("--underline", is_flag=True, help="Also underline the text.")
def color(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    code: int, text: str, background: bool, bold: bool, italic: bool, underline: bool
) -> None:
    """Print TEXT in palette color CODE (0-255)."""
    codes = [ansi.color(code, background)]
    if bold:
        codes.append(ansi.BOLD)
    if italic:
        codes.append(ansi.ITALIC)
    if underline:
        codes.append(ansi.UNDERLINE)
    click.echo(ansi.styled(text, *codes))


COMMANDS = [join_cmd, concat_cmd, path_cmd, colors, color]
