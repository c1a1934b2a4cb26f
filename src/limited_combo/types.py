"""
Shared type definitions for limited combination enumeration.

This module contains the small types used across the enumeration layers
to avoid circular import issues.

Types:
    Mode: Interpretation of a requested combination size
    InvalidConfiguration: Raised when there is nothing to enumerate
"""

from enum import Enum
from typing import Hashable, List, Mapping, TypeVar, Union


AtomType = TypeVar("AtomType", bound=Hashable)

# Availability map: atom -> number of indistinguishable copies
CountMap = Mapping[AtomType, int]

# Integer code assigned to one atom type inside a generator
Code = int
CodeList = List[Code]


class Mode(str, Enum):
    """Interpretation of the requested combination size."""
    EXACT = "exact"   # Exactly `size` atoms
    MIN = "min"       # At least `size` atoms, growing up to all atoms
    MAX = "max"       # At most `size` atoms, shrinking down to one atom

    @classmethod
    def coerce(cls, value: Union["Mode", str]) -> "Mode":
        """Accept a Mode or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(m.value for m in cls)
        raise InvalidConfiguration(f"Unknown mode {value!r} (expected one of: {choices})")


class InvalidConfiguration(ValueError):
    """The availability map or size cannot produce any combination."""


__all__ = [
    "AtomType",
    "CountMap",
    "Code",
    "CodeList",
    "Mode",
    "InvalidConfiguration",
]
