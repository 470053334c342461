"""Thin file-I/O wrappers.

Each helper performs a single filesystem operation and re-raises any
``OSError`` as `FileOperationError`, which records the operation, the path
involved and the operating system's reason. Text is read and written as UTF-8.
"""

import logging
import os
import shutil
from pathlib import Path

from clibkit.errors import FileOperationError

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]

ENCODING = "utf-8"


def _failure(operation: str, target: PathLike, error: OSError) -> FileOperationError:
    reason = error.strerror or str(error)
    failed = error.filename if error.filename is not None else target
    return FileOperationError(operation, os.fspath(failed), reason)


def file_exists(path: PathLike) -> bool:
    """Return True if ``path`` is an existing regular file."""
    return Path(path).is_file()


def read_file(path: PathLike) -> str:
    """Read the whole text of ``path``.

    Raises:
        FileOperationError: If the file cannot be opened or read.
    """
    try:
        content = Path(path).read_text(encoding=ENCODING)
    except OSError as e:
        raise _failure("read", path, e) from e
    logger.debug("Read %d characters from %s", len(content), path)
    return content


def write_file(path: PathLike, content: str) -> None:
    """Write ``content`` to ``path``, replacing any existing content.

    Raises:
        FileOperationError: If the file cannot be opened or written.
    """
    try:
        Path(path).write_text(content, encoding=ENCODING)
    except OSError as e:
        raise _failure("write", path, e) from e
    logger.debug("Wrote %d characters to %s", len(content), path)


def append_file(path: PathLike, content: str) -> None:
    """Append ``content`` to ``path``, creating the file if needed.

    Raises:
        FileOperationError: If the file cannot be opened or written.
    """
    try:
        with Path(path).open("a", encoding=ENCODING) as f:
            f.write(content)
    except OSError as e:
        raise _failure("append to", path, e) from e
    logger.debug("Appended %d characters to %s", len(content), path)


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy the contents of ``src`` to ``dst``.

    Raises:
        FileOperationError: If ``src`` cannot be read or ``dst`` written.
    """
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        raise _failure("copy", src, e) from e
    logger.debug("Copied %s to %s", src, dst)


def move_file(src: PathLike, dst: PathLike) -> None:
    """Move ``src`` to ``dst``, replacing ``dst`` if it exists.

    Raises:
        FileOperationError: If the move fails.
    """
    try:
        shutil.move(os.fspath(src), os.fspath(dst))
    except OSError as e:
        raise _failure("move", src, e) from e
    logger.debug("Moved %s to %s", src, dst)


def delete_file(path: PathLike) -> None:
    """Delete the file at ``path``.

    Raises:
        FileOperationError: If the file does not exist or cannot be removed.
    """
    try:
        Path(path).unlink()
    except OSError as e:
        raise _failure("delete", path, e) from e
    logger.debug("Deleted %s", path)
