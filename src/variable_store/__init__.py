"""
Variable Store - Runtime memory for an interpreted language

A fixed-identity variable store: typed value cells addressed by permanent
integers, resolved by name through a sorted index with binary search.
"""

from variable_store.domain.services.sorted_variable_store import (
    SortedVariableStore,
    create_store,
)
from variable_store.domain.value_objects import NOT_FOUND, Address, RamValue, ValueType

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"

__all__ = [
    "Address",
    "NOT_FOUND",
    "RamValue",
    "SortedVariableStore",
    "ValueType",
    "create_store",
]
