"""Ports layer - interface definitions following Hexagonal Architecture.

Inbound ports are the APIs offered to clients, here the interpreter that
assigns and looks up variables.
"""

from variable_store.ports.inbound import (
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
