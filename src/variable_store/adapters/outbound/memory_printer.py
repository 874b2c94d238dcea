"""Debug rendering of store contents.

Two dumps are produced, both in index (alphabetical) order:

    **MEMORY PRINT**
    Size: 2
    Capacity: 4
    Contents:
     a: int, 123
     b: str, 'apple'
    **END PRINT**

    **MEMORY MAP PRINT**
     a: 0
     b: 1
    **END PRINT**
"""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from variable_store.domain.entities import IndexEntry
from variable_store.domain.value_objects import RamValue


MEMORY_HEADER = "**MEMORY PRINT**"
MAP_HEADER = "**MEMORY MAP PRINT**"
FOOTER = "**END PRINT**"


def format_memory(
    size: int,
    capacity: int,
    contents: Iterable[tuple[str, RamValue]],
) -> str:
    """Render the memory dump.

    Args:
        size: Number of variables stored.
        capacity: Number of allocated cells.
        contents: (name, value) pairs in index order.

    Returns:
        The dump text, newline terminated.
    """
    lines = [
        MEMORY_HEADER,
        f"Size: {size}",
        f"Capacity: {capacity}",
        "Contents:",
    ]
    lines.extend(f" {name}: {value.render()}" for name, value in contents)
    lines.append(FOOTER)
    return "\n".join(lines) + "\n"


def format_memory_map(entries: Iterable[IndexEntry]) -> str:
    """Render the name-to-address map dump."""
    lines = [MAP_HEADER]
    lines.extend(f" {entry}" for entry in entries)
    lines.append(FOOTER)
    return "\n".join(lines) + "\n"


def print_memory(
    size: int,
    capacity: int,
    contents: Iterable[tuple[str, RamValue]],
    stream: TextIO | None = None,
) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(format_memory(size, capacity, contents))


def print_memory_map(entries: Iterable[IndexEntry], stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(format_memory_map(entries))
