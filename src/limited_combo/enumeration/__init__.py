"""
Combination enumeration submodule.

Provides the integer-coded walker and the typed layer on top of it.
"""

from .plain import PlainCombinationWalker
from .limited import TypedLimitedCombination, total_number_of_atoms

__all__ = [
    'PlainCombinationWalker',
    'TypedLimitedCombination',
    'total_number_of_atoms',
]
