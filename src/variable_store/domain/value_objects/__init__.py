"""Value objects for the variable store domain.

Exports:
    Identifiers:
        - Address: Permanent cell address
        - NOT_FOUND: Sentinel returned when a name has no address
        - INITIAL_CAPACITY, GROWTH_FACTOR: Default sizing policy

    Values:
        - ValueType: Tag of the six value variants
        - RamValue: Tagged value stored in a memory cell
        - ValueReleasedError: Use of a released value copy
"""

from variable_store.domain.value_objects.identifiers import (
    GROWTH_FACTOR,
    INITIAL_CAPACITY,
    INT64_MAX,
    INT64_MIN,
    NOT_FOUND,
    Address,
)
from variable_store.domain.value_objects.ram_value import (
    RamValue,
    ValueReleasedError,
    ValueType,
)

__all__ = [
    # Identifiers
    "Address",
    "NOT_FOUND",
    "INITIAL_CAPACITY",
    "GROWTH_FACTOR",
    "INT64_MIN",
    "INT64_MAX",
    # Values
    "ValueType",
    "RamValue",
    "ValueReleasedError",
]
