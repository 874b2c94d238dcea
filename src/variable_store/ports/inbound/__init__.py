"""Inbound ports - API contracts for the variable store."""

from variable_store.ports.inbound.variable_store import (
    InvalidAddressError,
    NameNotDefinedError,
    StoreDestroyedError,
    VariableStore,
    VariableStoreError,
    VariableStoreStats,
)

__all__ = [
    "InvalidAddressError",
    "NameNotDefinedError",
    "StoreDestroyedError",
    "VariableStore",
    "VariableStoreError",
    "VariableStoreStats",
]
