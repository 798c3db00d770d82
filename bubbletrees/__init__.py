"""Spanning trees of the bubble-sort graph B_n, with text and DOT output and a command line."""

__version__ = "0.1.0"

__all__ = ["permutations", "trees", "output", "cli"]