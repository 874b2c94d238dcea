"""Sorted name index mapping variable names to cell addresses.

The index is a sorted vector of (name, address) entries. Lookups are binary
searches; inserts find the lower-bound position and shift every later entry
one slot to the right. An entry's position in the index is unrelated to its
address: new variables always take the next free cell, wherever their name
sorts.

Names compare with Python string ordering (code point order), which agrees
with strcmp for ASCII names. The empty string is a valid name and sorts first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from variable_store.domain.value_objects import NOT_FOUND, Address


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """One name-to-address mapping.

    Attributes:
        name: The variable name.
        address: The cell assigned to the variable.
    """

    name: str
    address: Address

    def __post_init__(self) -> None:
        """Validate the entry."""
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")
        if self.address < 0:
            raise ValueError(f"address must be non-negative, got {self.address}")

    def __str__(self) -> str:
        return f"{self.name}: {self.address}"


class NameIndex:
    """Sorted vector of index entries with unique names."""

    def __init__(self) -> None:
        self._entries: list[IndexEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(list(self._entries))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) != NOT_FOUND

    def entry_at(self, position: int) -> IndexEntry:
        """Return the entry at an index position (not an address)."""
        return self._entries[position]

    def names(self) -> list[str]:
        """Return all names in index order."""
        return [entry.name for entry in self._entries]

    def find(self, name: str) -> Address:
        """Binary search for a name.

        Returns:
            The name's address, or NOT_FOUND.
        """
        lo = 0
        hi = len(self._entries) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            mid_name = self._entries[mid].name
            if name < mid_name:
                hi = mid - 1
            elif name > mid_name:
                lo = mid + 1
            else:
                return self._entries[mid].address
        return NOT_FOUND

    def lower_bound(self, name: str) -> int:
        """Return the first position whose name is >= the given name."""
        lo = 0
        hi = len(self._entries)
        while lo < hi:
            mid = (lo + hi) // 2
            if self._entries[mid].name < name:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def insert(self, name: str, address: Address) -> int:
        """Insert a new entry at its sorted position.

        Args:
            name: A name not yet in the index.
            address: The cell assigned to the name.

        Returns:
            The position the entry landed at.

        Raises:
            ValueError: If the name is already indexed.
        """
        position = self.lower_bound(name)
        if position < len(self._entries) and self._entries[position].name == name:
            raise ValueError(f"Name {name!r} is already indexed")

        self._entries.insert(position, IndexEntry(name=name, address=address))
        return position

    def clear(self) -> None:
        self._entries.clear()
