"""Domain service: exact-sum enumeration over prices with repetition.

Given a target and a list of distinct positive values sorted largest
first, find every count-vector ``(c_0, ..., c_{n-1})`` such that
``sum(c_i * value_i) == target``.

The search walks the values in index order and, for each one, tries
counts from zero upward.  A path never revisits an index, so each
count-vector is produced once and permutations ("2 of A then 1 of B"
versus "1 of B then 2 of A") cannot appear.

Partial vectors are immutable tuples extended by value at every step,
which keeps the search free of shared state: independent groups can be
solved concurrently without any coordination.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

CountVector = tuple[int, ...]
NumericSolution = tuple[int, ...]


def enumerate_count_vectors(target: int, values: Sequence[int]) -> list[CountVector]:
    """Return every count-vector over ``values`` that sums to ``target``.

    Vectors always have ``len(values)`` entries.  A non-positive target or
    an empty ``values`` gives an empty list, never an error.
    """
    if target <= 0 or not values:
        return []
    return list(_search(target, tuple(values), 0, ()))


def expand_count_vector(counts: CountVector, values: Sequence[int]) -> NumericSolution:
    """Turn ``(2, 0, 1)`` over ``(50, 30, 20)`` into ``(50, 50, 20)``."""
    expanded: list[int] = []
    for value, count in zip(values, counts):
        expanded.extend([value] * count)
    return tuple(expanded)


def find_numeric_solutions(target: int, values: Sequence[int]) -> list[NumericSolution]:
    """Every exact combination of ``values`` (repeats allowed) summing to ``target``.

    Each solution lists its prices in the order of ``values``, so callers
    passing a descending list get descending solutions.
    """
    return [
        expand_count_vector(counts, values)
        for counts in enumerate_count_vectors(target, values)
    ]


# --- Internal helpers ---------------------------------------------------------


def _search(
    remaining: int,
    values: tuple[int, ...],
    index: int,
    counts: CountVector,
) -> Iterator[CountVector]:
    if remaining <= 0:
        return

    value = values[index]

    # Last value: only one count can possibly fit.
    if index == len(values) - 1:
        count, leftover = divmod(remaining, value)
        if leftover == 0:
            yield _complete(counts + (count,), len(values))
        return

    count = 0
    while count * value <= remaining:
        if count * value == remaining:
            # Any higher count overshoots.
            yield _complete(counts + (count,), len(values))
            break
        yield from _search(remaining - count * value, values, index + 1, counts + (count,))
        count += 1


def _complete(counts: CountVector, size: int) -> CountVector:
    """Pad a partial vector with zeros for the values never reached."""
    return counts + (0,) * (size - len(counts))
