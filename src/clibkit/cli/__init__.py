"""Command-line argument helpers for programs built on clibkit."""

from .args import Argument, ArgumentKind, CliArguments, shift_args

__all__ = ["Argument", "ArgumentKind", "CliArguments", "shift_args"]
