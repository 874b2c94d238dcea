"""Growable array of memory cells.

Every cell holds exactly one RamValue. Cells that have never been written
hold NONE. The array only grows; growth keeps every existing cell at its
address.
"""

from __future__ import annotations

from variable_store.domain.value_objects import Address, RamValue


class CellArray:
    """Fixed-address cell storage with explicit capacity.

    The array owns every value it holds. Values are copied on the way in and
    on the way out, and a cell's previous value is released when it is
    overwritten.
    """

    def __init__(self, capacity: int) -> None:
        """Allocate `capacity` cells, all NONE.

        Raises:
            ValueError: If capacity < 1.
        """
        if capacity < 1:
            raise ValueError(f"Capacity must be >= 1, got {capacity}")
        self._cells: list[RamValue] = [RamValue.none() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        """Return the number of allocated cells."""
        return len(self._cells)

    def in_bounds(self, address: int) -> bool:
        return 0 <= address < len(self._cells)

    def load(self, address: Address) -> RamValue:
        """Return a copy of the value in a cell.

        Raises:
            IndexError: If the address is outside the allocated cells.
        """
        if not self.in_bounds(address):
            raise IndexError(f"Address {address} outside capacity {self.capacity}")
        return self._cells[address].copy()

    def peek(self, address: Address) -> RamValue:
        """Return the stored value itself, for rendering only."""
        return self._cells[address]

    def store(self, address: Address, value: RamValue) -> None:
        """Overwrite a cell with a copy of a value, releasing the old one.

        Raises:
            IndexError: If the address is outside the allocated cells.
        """
        if not self.in_bounds(address):
            raise IndexError(f"Address {address} outside capacity {self.capacity}")
        stored = value.copy()
        self._cells[address].release()
        self._cells[address] = stored

    def grow(self, new_capacity: int) -> None:
        """Extend the array to new_capacity cells; new cells are NONE.

        Raises:
            ValueError: If new_capacity is not larger than the current capacity.
        """
        if new_capacity <= self.capacity:
            raise ValueError(
                f"New capacity {new_capacity} must exceed current capacity {self.capacity}"
            )
        self._cells.extend(RamValue.none() for _ in range(new_capacity - self.capacity))

    def release_all(self) -> None:
        """Release every cell and drop the backing list."""
        for cell in self._cells:
            cell.release()
        self._cells = []
