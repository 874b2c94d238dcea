"""Domain services for the variable store.

Services coordinate the cell array and the name index to implement the
store's operations.
"""

from variable_store.domain.services.sorted_variable_store import (
    SortedVariableStore,
    create_store,
)

__all__ = [
    "SortedVariableStore",
    "create_store",
]
