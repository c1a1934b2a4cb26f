"""
Combinations over a limited but typed set of resources.

For available resources A:2, B:1, C:1 the following combinations exist:

    max size 1: A, B, C
    max size 2: AA, AB, AC, BC   (plus all of max size 1)
    max size 3: AAB, AAC, ABC    (plus all of max size 2)

The actual walk runs on small integer codes, so the caller's atom type is
only compared once when codes are assigned and again when a combination is
handed out.

Usage:
    from limited_combo import TypedLimitedCombination, Mode

    items = {"A": 2, "B": 1, "C": 1}
    combinations = TypedLimitedCombination(items, 2, Mode.MAX)
    while True:
        print(combinations.current())
        if not combinations.next():
            break

    # or, consuming the cursor
    for combination in TypedLimitedCombination(items, 2, Mode.MAX):
        ...
"""

import logging
from collections import Counter
from typing import Dict, Generic, Iterable, Iterator, List, Sequence, Tuple, Union

from ..types import AtomType, CodeList, CountMap, InvalidConfiguration, Mode
from .plain import PlainCombinationWalker

logger = logging.getLogger(__name__)


def total_number_of_atoms(count_map: CountMap) -> int:
    """Sum of all availability counts (0 for an empty map)."""
    return sum(count_map.values())


class TypedLimitedCombination(Generic[AtomType]):
    """
    Enumerate combinations of typed atoms under per-type availability limits.

    Each distinct atom gets a code in the atom's natural order (the smallest
    atom gets 0). The encoded multiset repeats every code as often as its atom
    is available and is walked by a PlainCombinationWalker that this object
    owns exclusively.
    """

    total_number_of_atoms = staticmethod(total_number_of_atoms)

    def __init__(self, count_map: CountMap, size: int, mode: Union[Mode, str] = Mode.EXACT):
        """
        Construct a limited combination generator.

        Args:
            count_map: Maps an atom to the maximum number of its occurrences.
            size: Together with mode, defines the combination size. Sizes
                larger than the total number of atoms are clamped to it.
            mode: Interpretation of size, i.e. exact, min or max.

        Raises:
            InvalidConfiguration: If there are no atoms to build combinations
                from, a count or the size is negative, or mode is unknown.
        """
        self._mode = Mode.coerce(mode)
        self._count_map: Dict[AtomType, int] = dict(count_map)

        negative = {atom: count for atom, count in self._count_map.items() if count < 0}
        if negative:
            raise InvalidConfiguration(f"Negative availability counts: {negative}")

        total = total_number_of_atoms(self._count_map)
        if not self._count_map or total == 0:
            raise InvalidConfiguration(
                "No atoms to generate combinations from -- check for empty map"
            )
        if size < 0:
            raise InvalidConfiguration(f"Combination size must not be negative, got {size}")

        self._requested_size = size
        self._total = total
        self._size = size
        if size > total:
            logger.debug("Clamping combination size %d to %d available atoms", size, total)
            self._size = total

        self._atoms, self._items = self._prepare()
        self._walker = PlainCombinationWalker(self._items, self._size, self._mode)
        self._produced = 1

    @classmethod
    def from_atoms(
        cls,
        atoms: Iterable[AtomType],
        size: int,
        mode: Union[Mode, str] = Mode.EXACT,
    ) -> "TypedLimitedCombination[AtomType]":
        """Build the availability map by counting repeated atoms, e.g. a deck list."""
        return cls(Counter(atoms), size, mode)

    def _prepare(self) -> Tuple[Tuple[AtomType, ...], CodeList]:
        """Assign codes in atom order and build the encoded item multiset."""
        atoms = tuple(sorted(self._count_map))
        items: CodeList = []
        for code, atom in enumerate(atoms):
            items.extend([code] * self._count_map[atom])

        logger.debug(
            "Encoded %d atom types into %d items (size=%d, mode=%s)",
            len(atoms), len(items), self._size, self._mode.value,
        )
        return atoms, items

    def _decode(self, codes: Sequence[int]) -> List[AtomType]:
        return [self._atoms[code] for code in codes]

    # -------------------------------------------------------------------------
    # Cursor
    # -------------------------------------------------------------------------

    def current(self) -> List[AtomType]:
        """
        Get the current combination.

        Returns:
            Atoms of the current combination, sorted in natural order.
        """
        return sorted(self._decode(self._walker.current()))

    def next(self) -> bool:
        """
        Forward to the next combination, so that current() returns it.

        Returns:
            True if there is another valid combination.
        """
        if self._walker.next():
            self._produced += 1
            return True
        if self._produced:
            logger.debug("Enumeration exhausted after %d combinations", self._produced)
            self._produced = 0
        return False

    def __iter__(self) -> Iterator[List[AtomType]]:
        """Yield the remaining combinations; this consumes the cursor."""
        if self._walker.exhausted:
            return
        while True:
            yield self.current()
            if not self.next():
                return

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def size(self) -> int:
        """Effective combination size, clamped to the total number of atoms."""
        return self._walker.size

    @property
    def requested_size(self) -> int:
        return self._requested_size

    @property
    def total_atoms(self) -> int:
        return self._total

    @property
    def atoms(self) -> Tuple[AtomType, ...]:
        """Atom types indexed by their code."""
        return self._atoms

    @property
    def exhausted(self) -> bool:
        return self._walker.exhausted

    def counts(self, combination: Iterable[AtomType]) -> Dict[AtomType, int]:
        """Per-atom occurrence counts of a combination, over every known atom."""
        occurrences = Counter(combination)
        return {atom: occurrences.get(atom, 0) for atom in self._atoms}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._count_map!r}, size={self._size}, "
            f"mode={self._mode.value!r})"
        )


__all__ = ["TypedLimitedCombination", "total_number_of_atoms"]
