"""Unit tests for enumeration/limited.py."""

import logging

import pytest

from limited_combo import (
    InvalidConfiguration,
    Mode,
    TypedLimitedCombination,
    total_number_of_atoms,
)


def drain(combinations):
    """Collect every combination via the current()/next() contract."""
    result = [combinations.current()]
    while combinations.next():
        result.append(combinations.current())
    return result


# =============================================================================
# TOTAL NUMBER OF ATOMS
# =============================================================================

class TestTotalNumberOfAtoms:
    """Tests for total_number_of_atoms()."""

    def test_sum(self, abc_counts):
        assert total_number_of_atoms(abc_counts) == 4

    def test_empty(self):
        assert total_number_of_atoms({}) == 0

    def test_static_method(self, abc_counts):
        """Also available on the class, as a static helper."""
        assert TypedLimitedCombination.total_number_of_atoms(abc_counts) == 4


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestConstruction:
    """Tests for encoding and validation at construction."""

    def test_codes_follow_natural_order(self):
        """Codes are assigned in sorted atom order, regardless of insertion order."""
        combinations = TypedLimitedCombination({"C": 1, "A": 2, "B": 1}, 2, Mode.EXACT)
        assert combinations.atoms == ("A", "B", "C")

    def test_encoded_items(self, abc_counts):
        """Each code repeats as often as its atom is available."""
        combinations = TypedLimitedCombination(abc_counts, 2, Mode.EXACT)
        assert combinations._items == [0, 0, 1, 2]

    def test_primed_after_construction(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 2, Mode.EXACT)
        assert combinations.current() == ["A", "A"]

    def test_empty_map(self):
        with pytest.raises(InvalidConfiguration):
            TypedLimitedCombination({}, 1, Mode.EXACT)

    def test_zero_total(self):
        with pytest.raises(InvalidConfiguration):
            TypedLimitedCombination({"A": 0, "B": 0}, 1, Mode.EXACT)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            TypedLimitedCombination({}, 1, Mode.EXACT)

    def test_negative_count(self):
        with pytest.raises(InvalidConfiguration):
            TypedLimitedCombination({"A": 2, "B": -1}, 1, Mode.EXACT)

    def test_negative_size(self, abc_counts):
        with pytest.raises(InvalidConfiguration):
            TypedLimitedCombination(abc_counts, -1, Mode.EXACT)

    def test_zero_count_atom_never_appears(self):
        """An atom with count 0 gets a code but is never produced."""
        combinations = TypedLimitedCombination({"A": 1, "B": 0, "C": 1}, 2, Mode.MAX)
        produced = drain(combinations)
        assert all("B" not in combination for combination in produced)
        assert combinations.atoms == ("A", "B", "C")

    def test_mode_from_string(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 2, "MAX")
        assert combinations.mode is Mode.MAX

    def test_unknown_mode(self, abc_counts):
        with pytest.raises(InvalidConfiguration):
            TypedLimitedCombination(abc_counts, 2, "most")

    def test_input_map_copied(self):
        """Later changes to the caller's map do not affect the generator."""
        counts = {"A": 1, "B": 1}
        combinations = TypedLimitedCombination(counts, 1, Mode.EXACT)
        counts["C"] = 5
        assert drain(combinations) == [["A"], ["B"]]


# =============================================================================
# CLAMPING
# =============================================================================

class TestClamping:
    """Oversized requests are clamped, never rejected."""

    def test_single_atom_clamped(self):
        """{A:1}, size 5, EXACT -> single [A] then exhausted."""
        combinations = TypedLimitedCombination({"A": 1}, 5, Mode.EXACT)
        assert combinations.size == 1
        assert combinations.requested_size == 5
        assert combinations.current() == ["A"]
        assert combinations.next() is False

    @pytest.mark.parametrize("mode", list(Mode))
    def test_clamped_sequence_identical(self, abc_counts, mode):
        oversized = drain(TypedLimitedCombination(abc_counts, 100, mode))
        exact_total = drain(TypedLimitedCombination(abc_counts, 4, mode))
        assert oversized == exact_total

    def test_clamping_logged(self, abc_counts, caplog):
        with caplog.at_level(logging.DEBUG, logger="limited_combo.enumeration.limited"):
            TypedLimitedCombination(abc_counts, 9, Mode.EXACT)
        assert "Clamping combination size 9 to 4" in caplog.text


# =============================================================================
# ENUMERATION
# =============================================================================

class TestEnumeration:
    """Tests for current()/next() over typed atoms."""

    def test_abc_max_two(self, abc_counts):
        """A:2, B:1, C:1 with max size 2 gives exactly 7 combinations."""
        produced = drain(TypedLimitedCombination(abc_counts, 2, Mode.MAX))
        assert len(produced) == 7
        assert {tuple(c) for c in produced} == {
            ("A",), ("B",), ("C",),
            ("A", "A"), ("A", "B"), ("A", "C"), ("B", "C"),
        }

    def test_abc_max_three(self, abc_counts):
        produced = drain(TypedLimitedCombination(abc_counts, 3, Mode.MAX))
        size_three = {tuple(c) for c in produced if len(c) == 3}
        assert size_three == {("A", "A", "B"), ("A", "A", "C"), ("A", "B", "C")}
        assert len(produced) == 10

    def test_min_mode(self, abc_counts):
        produced = drain(TypedLimitedCombination(abc_counts, 3, Mode.MIN))
        assert {tuple(c) for c in produced} == {
            ("A", "A", "B"), ("A", "A", "C"), ("A", "B", "C"), ("A", "A", "B", "C"),
        }

    def test_exact_zero_is_not_exact_one(self):
        """EXACT 0 yields the empty combination, not the size-1 ones."""
        zero = list(TypedLimitedCombination({"A": 2, "B": 1}, 0, Mode.EXACT))
        one = list(TypedLimitedCombination({"A": 2, "B": 1}, 1, Mode.EXACT))
        assert zero == [[]]
        assert one == [["A"], ["B"]]

    def test_max_zero_stays_within_size(self):
        produced = list(TypedLimitedCombination({"A": 2, "B": 1}, 0, Mode.MAX))
        assert all(len(combination) <= 0 for combination in produced)
        assert produced == [[]]

    def test_min_zero_excludes_empty(self, abc_counts):
        produced = list(TypedLimitedCombination(abc_counts, 0, Mode.MIN))
        assert [] not in produced
        assert len(produced) == 11

    def test_current_sorted(self):
        """Output is sorted by the atom's natural order, not by code."""
        combinations = TypedLimitedCombination({3: 1, 1: 2, 2: 1}, 3, Mode.EXACT)
        for combination in drain(combinations):
            assert combination == sorted(combination)

    def test_current_idempotent(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 2, Mode.EXACT)
        combinations.next()
        assert combinations.current() == combinations.current() == ["A", "B"]

    def test_next_false_forever(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 4, Mode.EXACT)
        assert combinations.next() is False
        assert combinations.exhausted
        assert combinations.next() is False

    def test_tuple_atoms(self):
        """Any orderable atom type works, e.g. tuples."""
        counts = {("x", 1): 1, ("x", 0): 2}
        produced = drain(TypedLimitedCombination(counts, 2, Mode.EXACT))
        assert produced[0] == [("x", 0), ("x", 0)]
        assert [("x", 0), ("x", 1)] in produced

    def test_independent_instances_agree(self, abc_counts):
        first = drain(TypedLimitedCombination(abc_counts, 2, Mode.MAX))
        second = drain(TypedLimitedCombination(dict(reversed(list(abc_counts.items()))), 2, Mode.MAX))
        assert first == second


# =============================================================================
# PYTHON SURFACE
# =============================================================================

class TestIteration:
    """Tests for iteration and helpers."""

    def test_iter_matches_cursor(self, abc_counts):
        by_cursor = drain(TypedLimitedCombination(abc_counts, 2, Mode.MAX))
        by_iter = list(TypedLimitedCombination(abc_counts, 2, Mode.MAX))
        assert by_iter == by_cursor

    def test_iter_consumes(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 2, Mode.EXACT)
        assert len(list(combinations)) == 4
        assert list(combinations) == []

    def test_iter_resumes_from_current(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 2, Mode.EXACT)
        combinations.next()
        assert list(combinations) == [["A", "B"], ["A", "C"], ["B", "C"]]

    def test_from_atoms(self):
        combinations = TypedLimitedCombination.from_atoms(["B", "A", "A", "C"], 2, Mode.MAX)
        assert combinations.total_atoms == 4
        assert len(list(combinations)) == 7

    def test_counts(self, abc_counts):
        combinations = TypedLimitedCombination(abc_counts, 2, Mode.EXACT)
        assert combinations.counts(["A", "C"]) == {"A": 1, "B": 0, "C": 1}

    def test_repr(self):
        combinations = TypedLimitedCombination({"A": 1}, 1, Mode.EXACT)
        assert repr(combinations) == "TypedLimitedCombination({'A': 1}, size=1, mode='exact')"
