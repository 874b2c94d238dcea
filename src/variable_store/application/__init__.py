"""Application layer for the variable store.

Exports:
    RuntimeMemory: Interpreter-facing facade over a variable store
"""

from variable_store.application.runtime_memory import RuntimeMemory

__all__ = [
    "RuntimeMemory",
]
