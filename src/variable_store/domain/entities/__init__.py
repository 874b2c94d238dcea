"""Domain entities for the variable store.

Exports:
    Name index:
        - IndexEntry: (name, address) pair
        - NameIndex: Sorted vector of entries with binary search

    Cells:
        - CellArray: Growable, fixed-address array of value cells
"""

from variable_store.domain.entities.cell_array import CellArray
from variable_store.domain.entities.name_index import IndexEntry, NameIndex

__all__ = [
    "CellArray",
    "IndexEntry",
    "NameIndex",
]
