"""Permutations of 1..n and the parent rule of the independent spanning trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import permutations

Permutation = tuple[int, ...]


def identity(n: int) -> Permutation:
    """Return the identity permutation (1, 2, ..., n)."""
    return tuple(range(1, n + 1))


def position_of(perm: Sequence[int], x: int) -> int:
    """Return the index of ``x`` in ``perm``, or ``len(perm)`` if it is absent."""
    try:
        return list(perm).index(x)
    except ValueError:
        return len(perm)


def swap_after(perm: Sequence[int], x: int) -> Permutation:
    """Swap ``x`` with the symbol to its right; leave ``perm`` as is if there is none."""
    result = list(perm)
    pos = position_of(result, x)
    if pos < len(result) - 1:
        result[pos], result[pos + 1] = result[pos + 1], result[pos]
    return tuple(result)


def find_position(v: Sequence[int], t: int, n: int) -> Permutation:
    """Parent rule for a permutation whose last symbol is ``n``, in tree ``t``."""
    ident = identity(n)
    if t == 2 and swap_after(v, t) == ident:
        return swap_after(v, t - 1)
    if v[n - 2] == t or v[n - 2] == n - 1:
        for i in reversed(range(n)):
            if v[i] != i + 1:
                return swap_after(v, i + 1)
    return swap_after(v, t)


def get_parent(v: Sequence[int], t: int, n: int) -> Permutation:
    """Return the parent of ``v`` in tree ``t``; the identity is its own parent."""
    v = tuple(v)
    ident = identity(n)
    if v == ident:
        return ident

    last = v[-1]
    if last == n:
        if t != n - 1:
            return find_position(v, t, n)
        return swap_after(v, v[n - 2])
    if last == n - 1 and v[n - 2] == n and swap_after(v, n) != ident:
        if t == 1:
            return swap_after(v, n)
        return swap_after(v, t - 1)
    if last == t:
        return swap_after(v, n)
    return swap_after(v, t)


def all_permutations(n: int) -> Iterator[Permutation]:
    """Yield every permutation of 1..n in lexicographic order."""
    yield from permutations(identity(n))