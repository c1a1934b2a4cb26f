"""
Plain combination walker over integer-coded multisets.

Walks every sub-multiset of a multiset of integer codes whose size is
allowed by a Mode. Repeated codes are indistinguishable, so a combination
is fully described by how many copies of each distinct code it uses.

Within one size the walker visits these count vectors in descending
lexicographic order: the first combination takes as many copies of the
lowest code as it can, then the next code, and so on. Advancing moves a
single copy from the rightmost movable position one step to the right and
refills everything after it greedily again.

Usage:
    walker = PlainCombinationWalker([0, 0, 1, 2], size=2, mode=Mode.EXACT)
    while True:
        print(walker.current())   # [0, 0], [0, 1], [0, 2], [1, 2]
        if not walker.next():
            break
"""

from collections import Counter
from typing import List, Sequence, Union

from ..types import Code, CodeList, InvalidConfiguration, Mode


class PlainCombinationWalker:
    """
    Cursor over the combinations of a multiset of integer codes.

    The walker is primed on construction: current() is valid right away.
    Once next() returns False the walker stays exhausted.
    """

    def __init__(self, items: Sequence[Code], size: int, mode: Union[Mode, str] = Mode.EXACT):
        """
        Args:
            items: Codes of the multiset; a code repeated n times can be used
                at most n times in a combination.
            size: Requested combination size, interpreted by mode. EXACT 0
                and MAX 0 yield only the empty combination; MIN 0 starts at 1.
            mode: EXACT, MIN or MAX.
        """
        self.mode = Mode.coerce(mode)
        if not items:
            raise InvalidConfiguration("Cannot walk combinations of an empty item list")
        if size < 0 or size > len(items):
            raise InvalidConfiguration(
                f"Combination size {size} outside of [0, {len(items)}]"
            )

        available = Counter(items)
        self._codes: CodeList = sorted(available)
        self._limits: List[int] = [available[code] for code in self._codes]
        self._total = len(items)

        self.size = size
        self._sizes = self._size_schedule(self.size)
        self._size_index = 0
        self._counts = self._first(self._sizes[0])
        self._exhausted = False

    def _size_schedule(self, size: int) -> Sequence[int]:
        if self.mode is Mode.MIN:
            return range(max(size, 1), self._total + 1)
        if self.mode is Mode.MAX and size > 0:
            return range(size, 0, -1)
        return (size,)

    def _first(self, size: int) -> List[int]:
        counts = [0] * len(self._limits)
        self._fill(counts, 0, size)
        return counts

    def _fill(self, counts: List[int], start: int, remaining: int) -> None:
        for j in range(start, len(counts)):
            take = min(self._limits[j], remaining)
            counts[j] = take
            remaining -= take

    def _advance(self) -> bool:
        """Step to the next count vector of the same size, in place."""
        counts = self._counts
        suffix_count = 0
        suffix_limit = 0
        for i in range(len(counts) - 2, -1, -1):
            suffix_count += counts[i + 1]
            suffix_limit += self._limits[i + 1]
            if counts[i] > 0 and suffix_count < suffix_limit:
                counts[i] -= 1
                self._fill(counts, i + 1, suffix_count + 1)
                return True
        return False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def current(self) -> CodeList:
        """Current combination as ascending codes."""
        return [
            code
            for code, count in zip(self._codes, self._counts)
            for _ in range(count)
        ]

    def next(self) -> bool:
        """
        Advance to the next combination.

        Returns:
            True if a new combination is available through current().
        """
        if self._exhausted:
            return False
        if self._advance():
            return True

        self._size_index += 1
        if self._size_index < len(self._sizes):
            self._counts = self._first(self._sizes[self._size_index])
            return True

        self._exhausted = True
        return False


__all__ = ["PlainCombinationWalker"]
