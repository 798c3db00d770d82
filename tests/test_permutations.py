import math

import pytest

from bubbletrees.permutations import (
    all_permutations,
    find_position,
    get_parent,
    identity,
    position_of,
    swap_after,
)


def _differing_indices(a, b):
    return [i for i, (x, y) in enumerate(zip(a, b)) if x != y]


def _assert_adjacent_swap(original, result):
    assert len(result) == len(original)
    diffs = _differing_indices(original, result)
    assert len(diffs) == 2
    first, second = diffs
    assert second == first + 1
    assert result[first] == original[second]
    assert result[second] == original[first]


def test_identity_is_sorted_symbols():
    ident = identity(6)
    assert sorted(ident) == list(ident)
    assert set(ident) == set(range(1, 7))


@pytest.mark.parametrize("perm", [(3, 1, 2), (4, 2, 1, 3), (1,)])
def test_position_of_finds_each_symbol(perm):
    for k, symbol in enumerate(perm):
        assert position_of(perm, symbol) == k


def test_position_of_missing_symbol_is_length():
    perm = (2, 1, 3)
    assert position_of(perm, 9) == len(perm)


def test_swap_after_moves_symbol_right():
    perm = (4, 2, 1, 3)
    for symbol in perm[:-1]:
        pos = position_of(perm, symbol)
        result = swap_after(perm, symbol)
        assert result[pos + 1] == symbol
        assert result[pos] == perm[pos + 1]
        _assert_adjacent_swap(perm, result)


def test_swap_after_last_symbol_unchanged():
    perm = (2, 3, 1)
    assert swap_after(perm, perm[-1]) == perm


def test_swap_after_missing_symbol_unchanged():
    perm = (2, 3, 1)
    assert swap_after(perm, 7) == perm


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_all_permutations_lexicographic_and_complete(n):
    perms = list(all_permutations(n))
    assert len(perms) == math.factorial(n)
    assert perms == sorted(perms)
    assert len(set(perms)) == len(perms)
    assert perms[0] == identity(n)
    assert perms[-1] == tuple(reversed(identity(n)))


@pytest.mark.parametrize("n", [2, 3, 4])
def test_identity_is_its_own_parent(n):
    for t in range(1, n):
        assert get_parent(identity(n), t, n) == identity(n)


@pytest.mark.parametrize("n", [3, 4, 5])
def test_parent_is_adjacent_neighbour(n):
    for perm in all_permutations(n):
        if perm == identity(n):
            continue
        for t in range(1, n):
            parent = get_parent(perm, t, n)
            assert sorted(parent) == sorted(perm)
            diffs = _differing_indices(perm, parent)
            assert len(diffs) == 2
            assert diffs[1] == diffs[0] + 1
            assert parent[diffs[0]] == perm[diffs[1]]
            assert parent[diffs[1]] == perm[diffs[0]]


def test_find_position_gives_adjacent_neighbour():
    n = 4
    for perm in all_permutations(n):
        if perm[-1] != n or perm == identity(n):
            continue
        for t in range(1, n - 1):
            neighbour = find_position(perm, t, n)
            assert sorted(neighbour) == sorted(perm)
            diffs = _differing_indices(perm, neighbour)
            assert len(diffs) == 2
            assert diffs[1] == diffs[0] + 1
            assert neighbour[diffs[0]] == perm[diffs[1]]
            assert neighbour[diffs[1]] == perm[diffs[0]]


def test_parent_worked_example_n3():
    assert get_parent((1, 3, 2), 1, 3) == (3, 1, 2)
    assert get_parent((2, 1, 3), 1, 3) == (1, 2, 3)


def test_get_parent_accepts_list():
    assert get_parent([1, 3, 2], 2, 3) == get_parent((1, 3, 2), 2, 3)