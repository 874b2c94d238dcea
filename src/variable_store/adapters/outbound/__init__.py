"""Outbound adapters - rendering store contents for humans."""

from variable_store.adapters.outbound.memory_printer import (
    format_memory,
    format_memory_map,
    print_memory,
    print_memory_map,
)

__all__ = [
    "format_memory",
    "format_memory_map",
    "print_memory",
    "print_memory_map",
]
