"""Unit tests for the exact-sum enumerator."""

from itertools import product

import pytest

from menusum.domain.service.enumerator import (
    enumerate_count_vectors,
    expand_count_vector,
    find_numeric_solutions,
)


def _brute_force(target: int, values: list[int]) -> set[tuple[int, ...]]:
    """Every count-vector, found by trying all count combinations."""
    ranges = [range(target // v + 1) for v in values]
    return {
        counts
        for counts in product(*ranges)
        if sum(c * v for c, v in zip(counts, values)) == target
    }


class TestEnumerateCountVectors:

    def test_single_value_exact_multiple(self):
        assert enumerate_count_vectors(90, [30]) == [(3,)]

    def test_single_value_not_a_multiple(self):
        assert enumerate_count_vectors(100, [30]) == []

    def test_empty_candidates(self):
        assert enumerate_count_vectors(100, []) == []

    def test_zero_target(self):
        assert enumerate_count_vectors(0, [30, 10]) == []

    def test_negative_target(self):
        assert enumerate_count_vectors(-5, [5]) == []

    def test_target_below_every_candidate(self):
        assert enumerate_count_vectors(10, [50, 20]) == []

    def test_vectors_have_one_entry_per_value(self):
        vectors = enumerate_count_vectors(50, [50, 20, 10])
        assert all(len(v) == 3 for v in vectors)
        assert (1, 0, 0) in vectors

    def test_no_permutation_duplicates(self):
        vectors = enumerate_count_vectors(8, [3, 2])
        assert sorted(vectors) == [(0, 4), (2, 1)]
        assert len(vectors) == len(set(vectors))

    @pytest.mark.parametrize(
        "target, values",
        [
            (7, [7, 6, 3, 2]),
            (8, [5, 3, 2]),
            (30, [10, 7, 5, 3, 1]),
            (1505, [580, 420, 355, 335, 275, 215]),
            (97, [13, 11]),
        ],
    )
    def test_matches_brute_force(self, target, values):
        vectors = enumerate_count_vectors(target, values)
        assert len(vectors) == len(set(vectors))
        assert set(vectors) == _brute_force(target, values)

    def test_idempotent(self):
        values = [10, 7, 5, 3, 1]
        assert set(enumerate_count_vectors(30, values)) == set(enumerate_count_vectors(30, values))


class TestExpandCountVector:

    def test_expands_in_value_order(self):
        assert expand_count_vector((2, 0, 1), (50, 30, 20)) == (50, 50, 20)

    def test_all_zero(self):
        assert expand_count_vector((0, 0), (5, 3)) == ()


class TestFindNumericSolutions:

    def test_every_solution_sums_to_target(self):
        solutions = find_numeric_solutions(1505, [580, 420, 355, 335, 275, 215])
        assert solutions
        assert all(sum(s) == 1505 for s in solutions)

    def test_solutions_are_descending(self):
        for solution in find_numeric_solutions(30, [10, 7, 5, 3, 1]):
            assert list(solution) == sorted(solution, reverse=True)

    def test_known_menu_answers(self):
        solutions = find_numeric_solutions(1505, [580, 420, 355, 335, 275, 215])
        assert sorted(solutions) == [
            (215,) * 7,
            (580, 355, 355, 215),
        ]

    def test_three_units_of_one_price(self):
        assert find_numeric_solutions(90, [30]) == [(30, 30, 30)]
