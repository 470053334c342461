"""Fragment collection and joining.

A `FragmentTable` is an ordered, counted, immutable collection of text
fragments built by `collect`. `join` concatenates the fragments of a table
with a separator between consecutive fragments, never before the first or
after the last.

Examples:
    ```py
    >>> join("-", collect("a", "b", "c"))
    'a-b-c'
    >>> join(",", collect())
    ''
    >>> concat("Hello", " World")
    'Hello World'
    ```

Notes:
    - Fragments are referenced, not copied. Strings are immutable, so a table
      can never observe a change to its fragments.
    - An empty table (``count == 0``) is a valid value, distinct from having
      no table at all (``None``).
    - Running out of memory surfaces as `AllocationError`; nothing here ever
      terminates the process.
"""

import os
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from clibkit.errors import AllocationError, FragmentTypeError

PATH_SEP = os.sep

# Longest str the interpreter can represent
MAX_TEXT_LENGTH = sys.maxsize


@dataclass(frozen=True, slots=True)
class FragmentTable:
    """Ordered collection of text fragments.

    Attributes:
        items: The fragments, in join order. Any sequence given here is
            stored as a tuple.

    Raises:
        FragmentTypeError: If any fragment is not a ``str``.
    """

    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Always a tuple, never an alias of the caller's sequence
        items = tuple(self.items)
        for position, fragment in enumerate(items):
            if not isinstance(fragment, str):
                raise FragmentTypeError(position, fragment)
        object.__setattr__(self, "items", items)

    @property
    def count(self) -> int:
        """Number of fragments in the table."""
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)


def collect(*fragments: str) -> FragmentTable:
    """Collect fragments into a table, preserving their order.

    Calling with no fragments returns an empty table; this is not an error.

    Args:
        *fragments: The text fragments to collect.

    Returns:
        FragmentTable: A table whose ``count`` equals the number of fragments.

    Raises:
        FragmentTypeError: If any fragment is not a ``str``.
        AllocationError: If the table cannot be allocated.
    """
    return collect_from(fragments)


def collect_from(fragments: Iterable[str]) -> FragmentTable:
    """Collect the fragments produced by an iterable into a table.

    Args:
        fragments: Any iterable of text fragments; it is consumed once.

    Returns:
        FragmentTable: The collected fragments in iteration order.

    Raises:
        FragmentTypeError: If any fragment is not a ``str``.
        AllocationError: If the table cannot be allocated.
    """
    try:
        items = tuple(fragments)
    except MemoryError as e:
        raise AllocationError("fragment table") from e

    return FragmentTable(items)


def joined_length(separator: str, table: FragmentTable) -> int:
    """Return the length of ``join(separator, table)`` without building it.

    Args:
        separator: Text placed between consecutive fragments.
        table: The fragments to measure.

    Returns:
        int: ``sum(len(f) for f in table) + len(separator) * (count - 1)``,
        or 0 for an empty table.
    """
    if table.count == 0:
        return 0
    return (table.count - 1) * len(separator) + sum(len(f) for f in table.items)


def join(separator: str, table: FragmentTable) -> str:
    """Join the fragments of ``table`` with ``separator``.

    An empty separator is plain concatenation. A table with a single fragment
    yields that fragment unchanged; an empty table yields ``""``.

    Args:
        separator: Text placed between consecutive fragments (may be empty).
        table: The fragments to join.

    Returns:
        str: The joined text.

    Raises:
        FragmentTypeError: If ``separator`` is not a ``str``.
        AllocationError: If the joined text cannot be allocated.
    """
    if not isinstance(separator, str):
        raise FragmentTypeError(None, separator)

    if table.count == 0:
        return ""

    if joined_length(separator, table) > MAX_TEXT_LENGTH:
        raise AllocationError("joined text")

    try:
        return separator.join(table.items)
    except MemoryError as e:
        raise AllocationError("joined text") from e


def join_all(separator: str, *fragments: str) -> str:
    """Collect ``fragments`` and join them with ``separator`` in one call."""
    return join(separator, collect(*fragments))


def concat(*fragments: str) -> str:
    """Concatenate ``fragments`` with no separator."""
    return join("", collect(*fragments))


def path(*fragments: str) -> str:
    """Join ``fragments`` with the platform path separator."""
    return join(PATH_SEP, collect(*fragments))
