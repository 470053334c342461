"""CLIBKIT

Small helpers for command-line tooling: fragment collection and joining,
ANSI terminal styling, labelled logging, and thin wrappers around the
environment, the filesystem and child processes.
"""

from .strings import (
    PATH_SEP,
    FragmentTable,
    collect,
    collect_from,
    concat,
    join,
    join_all,
    joined_length,
    path,
)

__all__ = [
    "__version__",
    "PATH_SEP",
    "FragmentTable",
    "collect",
    "collect_from",
    "concat",
    "join",
    "join_all",
    "joined_length",
    "path",
]
__version__ = "0.1.0"
