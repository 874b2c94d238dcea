"""Addresses and sizing constants for the variable store.

A variable's address is the index of the cell it occupies. Addresses are
handed out in write order and never change once assigned.
"""

from __future__ import annotations

from typing import NewType


Address = NewType("Address", int)
"""Permanent 0-based index of a memory cell."""

# Returned by address lookups for names that were never written
NOT_FOUND = Address(-1)

INITIAL_CAPACITY = 4
GROWTH_FACTOR = 2

# Payload range of INT, PTR and BOOLEAN cells
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
