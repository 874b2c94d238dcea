"""Runtime Memory - interpreter-facing facade over the variable store.

The store reports lookup failures with sentinels. An interpreter executing
`print(x)` wants an error instead, so this facade turns the sentinels into
exceptions and accepts plain Python values on assignment.

Usage:
    from variable_store.application import RuntimeMemory

    with RuntimeMemory() as memory:
        memory.assign("x", 123)
        memory.assign("name", "apple")
        value = memory.lookup("x")       # RamValue copy, caller-owned
        memory.lookup("y")               # raises NameNotDefinedError
"""

from __future__ import annotations

from types import TracebackType
from typing import TextIO

from variable_store.domain.services.sorted_variable_store import SortedVariableStore
from variable_store.domain.value_objects import NOT_FOUND, Address, RamValue
from variable_store.infrastructure.config import Config, get_config
from variable_store.infrastructure.logging import get_logger
from variable_store.infrastructure.metrics import MetricsRegistry, get_metrics
from variable_store.infrastructure.tracing import trace_span
from variable_store.ports.inbound.variable_store import (
    InvalidAddressError,
    NameNotDefinedError,
    VariableStoreStats,
)


logger = get_logger(__name__)


class RuntimeMemory:
    """Memory unit of a running interpreter.

    Owns one SortedVariableStore sized from configuration. Every operation
    runs inside a trace span.
    """

    def __init__(
        self,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Create the memory unit.

        Args:
            config: Configuration to size the store from. Uses get_config()
                if None.
            metrics: Metrics to update. When None, the global registry is
                used if metrics are enabled in configuration.
        """
        self._config = config or get_config()
        if metrics is None and self._config.observability.metrics_enabled:
            metrics = get_metrics()

        self._store = SortedVariableStore(
            initial_capacity=self._config.store.initial_capacity,
            growth_factor=self._config.store.growth_factor,
            metrics=metrics,
        )
        logger.debug(
            "runtime_memory_created",
            initial_capacity=self._config.store.initial_capacity,
            growth_factor=self._config.store.growth_factor,
        )

    @property
    def store(self) -> SortedVariableStore:
        """Return the underlying store."""
        return self._store

    @property
    def is_closed(self) -> bool:
        return self._store.destroyed

    def assign(self, name: str, value: object) -> Address:
        """Assign a variable.

        Args:
            name: Variable name.
            value: A RamValue or a plain Python value (int, float, str,
                bool or None).

        Returns:
            The variable's address.
        """
        ram_value = RamValue.from_python(value)
        with trace_span("memory.assign", {"variable.name": name}):
            self._store.write_by_name(ram_value, name)
            return self._store.address_of(name)

    def lookup(self, name: str) -> RamValue:
        """Return a copy of a variable's value.

        Raises:
            NameNotDefinedError: If the variable was never assigned.
        """
        with trace_span("memory.lookup", {"variable.name": name}):
            value = self._store.read_by_name(name)
        if value is None:
            raise NameNotDefinedError(name)
        return value

    def lookup_address(self, address: int) -> RamValue:
        """Return a copy of the value at an address.

        Raises:
            InvalidAddressError: If no variable occupies the address.
        """
        with trace_span("memory.lookup_address", {"variable.address": address}):
            value = self._store.read_by_address(address)
        if value is None:
            raise InvalidAddressError(address, self._store.size)
        return value

    def address_of(self, name: str) -> Address:
        """Return a variable's address.

        Raises:
            NameNotDefinedError: If the variable was never assigned.
        """
        address = self._store.address_of(name)
        if address == NOT_FOUND:
            raise NameNotDefinedError(name)
        return address

    def store_at(self, address: int, value: object) -> None:
        """Overwrite the cell at an address.

        Raises:
            InvalidAddressError: If the address is outside the allocated cells.
        """
        ram_value = RamValue.from_python(value)
        with trace_span("memory.store_at", {"variable.address": address}):
            written = self._store.write_by_address(ram_value, address)
        if not written:
            raise InvalidAddressError(address, self._store.capacity)

    def is_defined(self, name: str) -> bool:
        return name in self._store

    def snapshot(self) -> dict[str, RamValue]:
        """Return copies of every variable, keyed by name in name order."""
        result: dict[str, RamValue] = {}
        for entry in self._store.entries():
            value = self._store.read_by_address(entry.address)
            if value is not None:
                result[entry.name] = value
        return result

    def dump(self, stream: TextIO | None = None) -> None:
        self._store.dump(stream)

    def dump_map(self, stream: TextIO | None = None) -> None:
        self._store.dump_map(stream)

    def get_stats(self) -> VariableStoreStats:
        return self._store.get_stats()

    def close(self) -> None:
        """Destroy the underlying store. Closing twice is a no-op."""
        if not self._store.destroyed:
            self._store.destroy()

    def __enter__(self) -> RuntimeMemory:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
