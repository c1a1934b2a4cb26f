"""
Limited Combo: combinations of typed items with limited availability.

Enumerates every distinct combination of a typed multiset (e.g. A:2, B:1,
C:1) for an exact, minimum or maximum size, lazily and without duplicates.
The walk itself runs on integer codes; atoms are only decoded on output.

Submodules:
    enumeration - Integer walker and the typed combination generator
    parsing     - Availability map parsing
    export      - DataFrame / CSV / JSON export
    cli         - Command-line front end

Usage:
    from limited_combo import TypedLimitedCombination, Mode

    for combination in TypedLimitedCombination({"A": 2, "B": 1}, 2, Mode.MAX):
        print(combination)
"""

from .types import Mode, InvalidConfiguration
from .enumeration import (
    PlainCombinationWalker,
    TypedLimitedCombination,
    total_number_of_atoms,
)
from .parsing import parse_counts
from .export import combinations_to_frame

__all__ = [
    "Mode",
    "InvalidConfiguration",
    "PlainCombinationWalker",
    "TypedLimitedCombination",
    "total_number_of_atoms",
    "parse_counts",
    "combinations_to_frame",
]
