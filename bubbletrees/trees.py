"""The n - 1 independent spanning trees of the bubble-sort graph B_n."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from bubbletrees.permutations import Permutation, all_permutations, get_parent


def tree_parents(
    perms: Sequence[Permutation],
    index: Mapping[Permutation, int],
    t: int,
    n: int,
) -> list[int]:
    """Return, for each permutation, the index of its parent in tree ``t``."""
    return [index[get_parent(perm, t, n)] for perm in perms]


@dataclass(frozen=True)
class IndependentTrees:
    """All trees T_1 .. T_{n-1} over the permutations of 1..n."""

    n: int
    perms: tuple[Permutation, ...]
    index: dict[Permutation, int]
    parents: dict[int, tuple[int, ...]]
    child_lists: dict[int, tuple[tuple[int, ...], ...]]

    def _tree(self, t: int) -> int:
        if t not in self.parents:
            raise ValueError(f"tree number must be between 1 and {self.n - 1}, got {t}")
        return t

    def parent(self, t: int, index: int) -> int:
        """Index of the parent of permutation ``index`` in tree ``t``."""
        return self.parents[self._tree(t)][index]

    def children(self, t: int, index: int) -> tuple[int, ...]:
        """Indices of the children of permutation ``index`` in tree ``t``, ascending."""
        return self.child_lists[self._tree(t)][index]

    def edge_count(self, t: int) -> int:
        """Number of edges in tree ``t``."""
        return sum(len(kids) for kids in self.child_lists[self._tree(t)])


def build_trees(n: int) -> IndependentTrees:
    """Generate every permutation of 1..n and the parent links of each tree."""
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")

    perms = tuple(all_permutations(n))
    index = {perm: i for i, perm in enumerate(perms)}

    parents: dict[int, tuple[int, ...]] = {}
    child_lists: dict[int, tuple[tuple[int, ...], ...]] = {}
    for t in range(1, n):
        links = tree_parents(perms, index, t, n)
        kids: list[list[int]] = [[] for _ in perms]
        for i, parent_idx in enumerate(links):
            if parent_idx != i:
                kids[parent_idx].append(i)
        parents[t] = tuple(links)
        child_lists[t] = tuple(tuple(k) for k in kids)

    return IndependentTrees(
        n=n,
        perms=perms,
        index=index,
        parents=parents,
        child_lists=child_lists,
    )