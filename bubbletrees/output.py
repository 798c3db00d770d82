"""Text and Graphviz DOT renderings of the independent spanning trees."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from bubbletrees.permutations import Permutation, identity
from bubbletrees.trees import IndependentTrees


def _spaced(perm: Sequence[int]) -> str:
    """Each symbol followed by a space, as in ``"1 2 3 "``."""
    return "".join(f"{value} " for value in perm)


def _write(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)


def format_text_tree(trees: IndependentTrees, t: int) -> str:
    """Plain-text listing of every permutation with its parent and children in tree ``t``."""
    lines = [f"Tree T_{t} Structure:"]
    for i, current in enumerate(trees.perms):
        parent_idx = trees.parent(t, i)
        parent = trees.perms[parent_idx]
        kids = trees.children(t, i)
        if kids:
            children = "".join(f"[{_spaced(trees.perms[k])}] " for k in kids)
        else:
            children = "None"
        lines.append(
            f"Permutation {i} [{_spaced(current)}] -> Parent [{_spaced(parent)}] "
            f"(Index {parent_idx}), Children: {children}"
        )
    return "\n".join(lines) + "\n"


def format_dot_tree(trees: IndependentTrees, t: int) -> str:
    """DOT graph of tree ``t`` with edges from parent to child and the root on top."""
    root = trees.index[identity(trees.n)]
    parts = [
        f"digraph Tree_T_{t} {{\n",
        '  node [shape=box, fontname="Courier"];\n',
    ]
    parts.extend(
        f'  n{i} [label="{_spaced(perm)}"];\n' for i, perm in enumerate(trees.perms)
    )
    for parent_idx in range(len(trees.perms)):
        parts.extend(
            f"  n{parent_idx} -> n{child};\n"
            for child in trees.children(t, parent_idx)
            if child != root
        )
    parts.append(f"  {{ rank=source; n{root} }}\n")
    parts.append("}\n")
    return "".join(parts)


def format_rank_dot_tree(
    perms: Sequence[Permutation], parents: Sequence[int], t: int
) -> str:
    """DOT graph of tree ``t`` with edges from child to parent, drawn bottom-up."""
    parts = [
        f"digraph Tree_T_{t} {{\n",
        "    rankdir=BT;\n",
        "    node [shape=box];\n\n",
        "    // Nodes\n",
    ]
    parts.extend(
        f'    node{i} [label="[{" ".join(str(v) for v in perm)}]"];\n'
        for i, perm in enumerate(perms)
    )
    parts.append("\n    // Edges\n")
    parts.extend(
        f"    node{i} -> node{parent_idx};\n"
        for i, parent_idx in enumerate(parents)
        if i != parent_idx
    )
    parts.append("\n}\n")
    return "".join(parts)


def write_serial_trees(
    trees: IndependentTrees, directory: str | os.PathLike[str] = "."
) -> list[Path]:
    """Write ``tree_T_<t>.dot`` for every tree and return the paths written."""
    base = Path(directory)
    paths = []
    for t in range(1, trees.n):
        path = base / f"tree_T_{t}.dot"
        _write(path, format_dot_tree(trees, t))
        paths.append(path)
    return paths


def write_rank_tree(
    perms: Sequence[Permutation],
    parents: Sequence[int],
    t: int,
    rank: int,
    directory: str | os.PathLike[str] = ".",
) -> Path:
    """Write ``tree_T_<t>_rank_<rank>.dot`` and return its path."""
    path = Path(directory) / f"tree_T_{t}_rank_{rank}.dot"
    _write(path, format_rank_dot_tree(perms, parents, t))
    return path