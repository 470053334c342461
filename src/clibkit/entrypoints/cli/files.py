"""File commands: thin wrappers over `clibkit.files`.

Human-oriented notices go to **stderr**; ``file cat`` writes the file's text
to **stdout**. Any `FileOperationError` becomes a red error line and exit
status 1.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import click
import click_extra as clickx

from clibkit import files as file_helpers
from clibkit.errors import FileOperationError

from .helpers import error, success, warn

P = ParamSpec("P")
R = TypeVar("R")


def _fail_on_file_error(func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except FileOperationError as e:
            error(str(e))
            raise click.exceptions.Exit(1) from e

    return wrapper


@click.group(cls=clickx.ExtraGroup, name="file")
def file_group() -> None:
    """File commands."""


@file_group.command()
@click.argument("path", type=click.Path(dir_okay=False))
@_fail_on_file_error
def cat(path: str) -> None:
    """Print the contents of PATH."""
    click.echo(file_helpers.read_file(path), nl=False)


@file_group.command()
@click.argument("src", type=click.Path(dir_okay=False))
@click.argument("dst", type=click.Path(dir_okay=False))
@click.option("--force", is_flag=True, help="Overwrite DST without confirmation.")
@_fail_on_file_error
def copy(src: str, dst: str, force: bool) -> None:
    """Copy SRC to DST."""
    _confirm_overwrite(dst, force)
    file_helpers.copy_file(src, dst)
    success(f"Copied {src} to {dst}")


@file_group.command()
@click.argument("src", type=click.Path(dir_okay=False))
@click.argument("dst", type=click.Path(dir_okay=False))
@click.option("--force", is_flag=True, help="Overwrite DST without confirmation.")
@_fail_on_file_error
def move(src: str, dst: str, force: bool) -> None:
    """Move SRC to DST."""
    _confirm_overwrite(dst, force)
    file_helpers.move_file(src, dst)
    success(f"Moved {src} to {dst}")


@file_group.command()
@click.argument("path", type=click.Path(dir_okay=False))
@_fail_on_file_error
def rm(path: str) -> None:
    """Delete PATH."""
    file_helpers.delete_file(path)
    success(f"Deleted {path}")


def _confirm_overwrite(dst: str, force: bool) -> None:
    if force or not file_helpers.file_exists(dst):
        return
    warn(f"{dst} already exists and will be overwritten.")
    click.confirm("Are you sure you want to proceed?", abort=True)
