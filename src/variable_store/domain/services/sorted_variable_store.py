"""Sorted-index variable store.

This module implements the VariableStore port: the memory unit an
interpreter uses to hold its variables.

Layout:
    cells:  [v0][v1][v2][v3] ... up to capacity, NONE past size
    index:  [(a, 2)][(b, 0)][(z, 1)]  sorted by name, one entry per variable

A new variable always takes cell `size`, then its index entry is inserted at
its sorted position. Because cells are only ever appended, an address never
changes once assigned, even across capacity growth.

Complexity:
    - address_of / read_by_name: O(log n) binary search
    - read_by_address / write_by_address: O(1)
    - write_by_name of a new name: O(n) for the index shift, amortized O(1)
      for cell growth
"""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Iterator, TextIO

from variable_store.adapters.outbound.memory_printer import print_memory, print_memory_map
from variable_store.domain.entities import CellArray, IndexEntry, NameIndex
from variable_store.domain.value_objects import (
    GROWTH_FACTOR,
    INITIAL_CAPACITY,
    NOT_FOUND,
    Address,
    RamValue,
)
from variable_store.infrastructure.logging import get_logger
from variable_store.ports.inbound.variable_store import (
    StoreDestroyedError,
    VariableStoreStats,
)

if TYPE_CHECKING:
    from variable_store.infrastructure.metrics import MetricsRegistry


logger = get_logger(__name__)


class SortedVariableStore:
    """Variable store backed by a cell array and a sorted name index.

    Values are copied on every write and every read, so the store never
    shares a value with its callers. Copies returned by reads belong to the
    caller and are released with release() (or by using them as context
    managers).

    Not thread-safe: a store has exactly one owner.

    Example:
        >>> store = SortedVariableStore()
        >>> store.write_by_name(RamValue.of_int(123), "x")
        True
        >>> store.address_of("x")
        0
        >>> with store.read_by_name("x") as value:
        ...     value.payload
        123
    """

    def __init__(
        self,
        initial_capacity: int = INITIAL_CAPACITY,
        growth_factor: int = GROWTH_FACTOR,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Create an empty store.

        Args:
            initial_capacity: Cells allocated up front (default 4).
            growth_factor: Capacity multiplier when full (default 2).
            metrics: Optional Prometheus metrics to update.

        Raises:
            ValueError: If initial_capacity < 1 or growth_factor < 2.
        """
        if initial_capacity < 1:
            raise ValueError(f"Initial capacity must be >= 1, got {initial_capacity}")
        if growth_factor < 2:
            raise ValueError(f"Growth factor must be >= 2, got {growth_factor}")

        self._cells = CellArray(initial_capacity)
        self._index = NameIndex()
        self._size = 0
        self._growth_factor = growth_factor
        self._metrics = metrics
        self._destroyed = False

        # Statistics
        self._growth_count = 0
        self._read_hits = 0
        self._read_misses = 0
        self._writes = 0
        self._rejected_writes = 0

        if self._metrics is not None:
            self._metrics.update_occupancy(self._size, self._cells.capacity)

    # ------------------------------------------------------------------
    # Sizing
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Return the number of distinct variables stored."""
        self._ensure_live()
        return self._size

    @property
    def capacity(self) -> int:
        """Return the number of allocated cells."""
        self._ensure_live()
        return self._cells.capacity

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def __len__(self) -> int:
        return self.size

    def __contains__(self, name: object) -> bool:
        self._ensure_live()
        return name in self._index

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def address_of(self, name: str) -> Address:
        """Return the address of a variable.

        Args:
            name: Variable name (the empty string is a valid name).

        Returns:
            The variable's permanent address, or NOT_FOUND if it was never
            written.
        """
        self._ensure_live()
        _check_name(name)
        return self._index.find(name)

    def read_by_address(self, address: int) -> RamValue | None:
        """Return a copy of the value at an address.

        Only addresses in [0, size) hold variables; anything else, including
        allocated but unassigned cells, reads as not found.

        Returns:
            A caller-owned copy, or None.
        """
        self._ensure_live()
        _check_address(address)
        if not 0 <= address < self._size:
            self._record_read("address", hit=False)
            return None

        self._record_read("address", hit=True)
        return self._cells.load(Address(address))

    def read_by_name(self, name: str) -> RamValue | None:
        """Return a copy of a variable's value.

        Returns:
            A caller-owned copy, or None if the name was never written.
        """
        self._ensure_live()
        _check_name(name)
        address = self._index.find(name)
        if address == NOT_FOUND:
            self._record_read("name", hit=False)
            return None

        self._record_read("name", hit=True)
        return self._cells.load(address)

    def release(self, value: RamValue) -> None:
        """Release a copy returned by a read.

        Raises:
            ValueReleasedError: If the copy was already released.
        """
        value.release()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def write_by_address(self, value: RamValue, address: int) -> bool:
        """Overwrite the cell at an address with a copy of a value.

        This is a raw cell write: it never changes size or the name index.

        Returns:
            True if written, False if the address is outside [0, capacity).
        """
        self._ensure_live()
        _check_value(value)
        _check_address(address)
        if not self._cells.in_bounds(address):
            self._record_write("address", accepted=False)
            return False

        self._cells.store(Address(address), value)
        self._record_write("address", accepted=True)
        return True

    def write_by_name(self, value: RamValue, name: str) -> bool:
        """Assign a variable.

        An existing variable is overwritten in place. A new variable is
        given the next free cell (growing capacity if every cell is taken)
        and an index entry at its sorted position.

        Returns:
            True (always succeeds).
        """
        self._ensure_live()
        _check_value(value)
        _check_name(name)

        address = self._index.find(name)
        if address != NOT_FOUND:
            self._cells.store(address, value)
            self._record_write("name", accepted=True)
            return True

        if self._size == self._cells.capacity:
            self._grow()

        # Cell first: a value that fails to copy must not leave an index entry behind
        address = Address(self._size)
        self._cells.store(address, value)
        self._index.insert(name, address)
        self._size += 1

        self._record_write("name", accepted=True)
        if self._metrics is not None:
            self._metrics.update_occupancy(self._size, self._cells.capacity)
        return True

    def _grow(self) -> None:
        """Multiply capacity by the growth factor, keeping every cell."""
        old_capacity = self._cells.capacity
        new_capacity = old_capacity * self._growth_factor
        self._cells.grow(new_capacity)
        self._growth_count += 1

        logger.debug(
            "store_grown",
            old_capacity=old_capacity,
            new_capacity=new_capacity,
            size=self._size,
        )
        if self._metrics is not None:
            self._metrics.record_growth(new_capacity)

    # ------------------------------------------------------------------
    # Iteration and diagnostics
    # ------------------------------------------------------------------

    def names(self) -> list[str]:
        """Return the stored names in alphabetical order."""
        self._ensure_live()
        return self._index.names()

    def entries(self) -> Iterator[IndexEntry]:
        """Iterate over the index entries in alphabetical order."""
        self._ensure_live()
        return iter(self._index)

    def dump(self, stream: TextIO | None = None) -> None:
        """Print size, capacity and every variable, in name order."""
        self._ensure_live()
        contents = [
            (entry.name, self._cells.peek(entry.address)) for entry in self._index
        ]
        print_memory(self._size, self._cells.capacity, contents, stream)

    def dump_map(self, stream: TextIO | None = None) -> None:
        """Print every name with its address, in name order."""
        self._ensure_live()
        print_memory_map(self._index, stream)

    def get_stats(self) -> VariableStoreStats:
        """Return store statistics for monitoring."""
        self._ensure_live()
        return VariableStoreStats(
            size=self._size,
            capacity=self._cells.capacity,
            growth_count=self._growth_count,
            read_hits=self._read_hits,
            read_misses=self._read_misses,
            writes=self._writes,
            rejected_writes=self._rejected_writes,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def destroy(self) -> None:
        """Release every stored value and the backing arrays.

        Raises:
            StoreDestroyedError: If the store was already destroyed.
        """
        self._ensure_live()
        size = self._size
        capacity = self._cells.capacity

        self._cells.release_all()
        self._index.clear()
        self._size = 0
        self._destroyed = True

        logger.debug("store_destroyed", size=size, capacity=capacity)

    def __enter__(self) -> SortedVariableStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._destroyed:
            self.destroy()

    def _ensure_live(self) -> None:
        if self._destroyed:
            raise StoreDestroyedError("Variable store has been destroyed")

    def _record_read(self, by: str, hit: bool) -> None:
        if hit:
            self._read_hits += 1
        else:
            self._read_misses += 1
        if self._metrics is not None:
            self._metrics.record_read(by, hit)

    def _record_write(self, by: str, accepted: bool) -> None:
        if accepted:
            self._writes += 1
        else:
            self._rejected_writes += 1
        if self._metrics is not None:
            self._metrics.record_write(by, accepted)


def create_store(
    initial_capacity: int = INITIAL_CAPACITY,
    growth_factor: int = GROWTH_FACTOR,
    metrics: MetricsRegistry | None = None,
) -> SortedVariableStore:
    """Create an empty store with capacity 4 (by default) and size 0."""
    return SortedVariableStore(
        initial_capacity=initial_capacity,
        growth_factor=growth_factor,
        metrics=metrics,
    )


def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Variable name must be str, got {type(name).__name__}")


def _check_address(address: object) -> None:
    if isinstance(address, bool) or not isinstance(address, int):
        raise TypeError(f"Address must be int, got {type(address).__name__}")


def _check_value(value: object) -> None:
    if not isinstance(value, RamValue):
        raise TypeError(f"Expected RamValue, got {type(value).__name__}")
