"""Command line entry point: build the trees of B_n and write them as DOT files."""

from __future__ import annotations

import argparse
import os
import sys
import time
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import TextIO

from bubbletrees.output import write_rank_tree, write_serial_trees
from bubbletrees.permutations import all_permutations
from bubbletrees.trees import IndependentTrees, build_trees, tree_parents

MIN_N = 2
MAX_N = 10


def _check_n(n: int) -> None:
    if not MIN_N <= n <= MAX_N:
        raise ValueError(f"Invalid n. Use {MIN_N} \u2264 n \u2264 {MAX_N}.")


def run_serial(
    n: int, directory: str | os.PathLike[str] = ".", out: TextIO | None = None
) -> IndependentTrees:
    """Build all trees in one process, report counts and write one DOT file per tree."""
    _check_n(n)
    out = sys.stdout if out is None else out

    start = time.perf_counter()
    trees = build_trees(n)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    out.write(f"\nGenerated B_{n} in {elapsed_ms} ms\n")
    out.write(f"Total permutations: {len(trees.perms)}\n")
    for t in range(1, n):
        out.write(f"Tree T_{t} edges: {trees.edge_count(t)}\n")

    write_serial_trees(trees, directory)
    return trees


def _rank_job(n: int, rank: int, workers: int, directory: str) -> tuple[list[str], float]:
    """Build and write the trees assigned to one rank; return paths and elapsed seconds."""
    perms = tuple(all_permutations(n))
    index = {perm: i for i, perm in enumerate(perms)}

    start = time.perf_counter()
    paths = []
    for t in range(1, n):
        if (t - 1) % workers == rank:
            parents = tree_parents(perms, index, t, n)
            paths.append(str(write_rank_tree(perms, parents, t, rank, directory)))
    return paths, time.perf_counter() - start


def run_distributed(
    n: int,
    workers: int,
    directory: str | os.PathLike[str] = ".",
    out: TextIO | None = None,
) -> list[Path]:
    """Share the trees round-robin among ``workers`` processes, each writing its own files."""
    _check_n(n)
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    out = sys.stdout if out is None else out

    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(_rank_job, n, rank, workers, os.fspath(directory))
            for rank in range(workers)
        ]
        results = [future.result() for future in futures]

    max_elapsed = max(elapsed for _, elapsed in results)
    out.write(f"Max elapsed time across ranks: {max_elapsed:g} seconds.\n")
    return sorted(Path(p) for paths, _ in results for p in paths)


def _read_n(raw: str | None) -> int | None:
    if raw is None:
        raw = input(f"Enter n ({MIN_N}-{MAX_N}): ")
    try:
        return int(raw.strip())
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the program; ``n`` is read from standard input when not given."""
    parser = argparse.ArgumentParser(
        prog="bubbletrees",
        description="Build the independent spanning trees of the bubble-sort graph B_n.",
    )
    parser.add_argument("n", nargs="?", help=f"size of the permutations ({MIN_N}-{MAX_N})")
    parser.add_argument(
        "-w", "--workers", type=int, default=None,
        help="share the trees among this many processes",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="directory the DOT files are written to"
    )
    args = parser.parse_args(argv)

    try:
        n = _read_n(args.n)
    except EOFError:
        n = None
    if n is None or not MIN_N <= n <= MAX_N:
        print(f"Invalid n. Use {MIN_N} \u2264 n \u2264 {MAX_N}.", file=sys.stderr)
        return 1

    try:
        if args.workers is None:
            run_serial(n, args.directory, sys.stdout)
        else:
            run_distributed(n, args.workers, args.directory, sys.stdout)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"failed to write output: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())