# bubbletrees

`bubbletrees` builds the `n - 1` spanning trees `T_1 … T_{n-1}` of the bubble-sort graph `B_n`. Each vertex of the graph is a permutation of `1..n`, and every tree is rooted at the identity permutation. The trees can be rendered as plain text or as Graphviz DOT.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
bubbletrees [n] [-w WORKERS] [-d DIRECTORY]
```

- `n` is the size of the permutations. It must be between 2 and 10. If you leave it out, the command prompts for it with `Enter n (2-10): `.
- `-d`, `--directory` sets the directory the DOT files are written to. The default is the current directory, and the directory must already exist.
- `-w`, `--workers` splits the trees round-robin among that many worker processes.

Without `--workers`, the command builds every tree in one process. It prints three things:

- the build time in milliseconds
- the number of permutations
- the number of edges in each tree

It then writes one `tree_T_<t>.dot` file per tree. In these files, edges run from parent to child, and the root is placed at the top.

With `--workers`, each worker `r` writes `tree_T_<t>_rank_<r>.dot` for the trees it was given. In these files, edges run from child to parent and the graph is drawn bottom-up. The command then prints the longest time any worker took.

The command exits with the following status:

- 0 on success
- 1 for an invalid `n` or worker count
- 2 if an output file cannot be written

## Library use

```python
from bubbletrees.permutations import all_permutations, get_parent, identity
from bubbletrees.trees import build_trees, tree_parents
from bubbletrees.output import format_dot_tree, format_text_tree, write_serial_trees

perms = list(all_permutations(4))    # tuples in lexicographic order, identity first
print(get_parent((2, 1, 3, 4), 1, 4))

trees = build_trees(4)
print(trees.parent(1, 5))            # parent index of permutation 5 in T_1
print(trees.children(1, 0))          # child indices of the root in T_1, ascending
print(trees.edge_count(2))           # number of edges in T_2

print(format_text_tree(trees, 1))
print(format_dot_tree(trees, 1))
write_serial_trees(trees, "out")     # out/tree_T_1.dot, out/tree_T_2.dot, ...
```

The functions are spread over three modules.

`bubbletrees.permutations` holds the permutation helpers:

- `identity`
- `position_of`
- `swap_after`
- `find_position`
- `get_parent`
- `all_permutations`

`bubbletrees.trees`:

- `tree_parents(perms, index, t, n)` computes the parent indices of a single tree.
- `build_trees(n)` returns an `IndependentTrees` object. It holds `perms`, `index`, `parents` and `child_lists`.
- Any tree number outside `1..n-1` raises `ValueError`.

`bubbletrees.output`:

- `format_rank_dot_tree` and `write_rank_tree` produce the per-worker DOT layout.
- `format_text_tree` gives a plain-text listing of each permutation with its parent and children.

## What it does not do

The command writes only DOT files. The plain-text listing is available only through `format_text_tree`. The package does not render the DOT files to images; use Graphviz for that.