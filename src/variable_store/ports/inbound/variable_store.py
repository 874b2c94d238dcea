"""Variable Store port for interpreter memory.

This inbound port defines the contract between an interpreter and its
memory unit. Variables are written by name; the first write assigns the
variable a cell address that never changes afterwards.

Key concepts:
- Reads return copies owned by the caller, who releases them when done
- Lookup failures are reported with sentinels (None, NOT_FOUND, False),
  never raised
- Capacity grows by doubling when a new name arrives and every cell is taken
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol, TextIO

from variable_store.domain.value_objects import Address, RamValue


@dataclass
class VariableStoreStats:
    """Statistics for store monitoring."""

    size: int  # Variables stored
    capacity: int  # Cells allocated
    growth_count: int  # Capacity growths so far
    read_hits: int  # Reads that found a value
    read_misses: int  # Reads of absent names or addresses
    writes: int  # Accepted writes
    rejected_writes: int  # Writes outside the allocated cells

    @property
    def load_factor(self) -> float:
        """Fraction of allocated cells in use."""
        return self.size / self.capacity if self.capacity > 0 else 0.0


class VariableStore(Protocol):
    """Protocol for interpreter variable storage.

    Example:
        store.write_by_name(RamValue.of_int(123), "x")
        value = store.read_by_name("x")
        try:
            ...
        finally:
            store.release(value)
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """Return the number of distinct variables stored."""
        ...

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Return the number of allocated cells."""
        ...

    @abstractmethod
    def address_of(self, name: str) -> Address:
        """Return the address of a variable, or NOT_FOUND."""
        ...

    @abstractmethod
    def read_by_address(self, address: int) -> RamValue | None:
        """Return a copy of the value at an address in [0, size), else None."""
        ...

    @abstractmethod
    def read_by_name(self, name: str) -> RamValue | None:
        """Return a copy of a variable's value, else None."""
        ...

    @abstractmethod
    def release(self, value: RamValue) -> None:
        """Release a copy returned by a read.

        Raises:
            ValueReleasedError: If the copy was already released.
        """
        ...

    @abstractmethod
    def write_by_address(self, value: RamValue, address: int) -> bool:
        """Overwrite the cell at an address in [0, capacity).

        Returns:
            True if written, False if the address is outside capacity.
        """
        ...

    @abstractmethod
    def write_by_name(self, value: RamValue, name: str) -> bool:
        """Assign a variable, creating it on first write.

        Returns:
            True (always succeeds).
        """
        ...

    @abstractmethod
    def destroy(self) -> None:
        """Release every stored value and the backing arrays."""
        ...

    @abstractmethod
    def dump(self, stream: TextIO | None = None) -> None:
        """Print size, capacity and every variable in name order."""
        ...

    @abstractmethod
    def dump_map(self, stream: TextIO | None = None) -> None:
        """Print every name with its address in name order."""
        ...

    @abstractmethod
    def get_stats(self) -> VariableStoreStats:
        """Return store statistics for monitoring."""
        ...


class VariableStoreError(Exception):
    """Base class for variable store errors."""

    pass


class StoreDestroyedError(VariableStoreError):
    """Raised when a destroyed store is used."""

    pass


class NameNotDefinedError(VariableStoreError, KeyError):
    """Raised by the runtime facade when a variable was never assigned."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"name '{self.name}' is not defined"


class InvalidAddressError(VariableStoreError, IndexError):
    """Raised by the runtime facade for addresses outside the store."""

    def __init__(self, address: int, limit: int) -> None:
        super().__init__(address, limit)
        self.address = address
        self.limit = limit

    def __str__(self) -> str:
        return f"address {self.address} is outside [0, {self.limit})"
