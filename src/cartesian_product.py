"""Ordered cartesian product over lists of path fragments."""

from collections.abc import Sequence


def cartesian_product(axes: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return every combination taking one fragment from each axis.

    The first axis varies slowest and the last axis fastest, so earlier
    entries carry higher lookup priority. Zero axes yield a single empty
    combination; any empty axis yields no combinations at all.
    """
    combinations: list[list[str]] = [[]]
    for axis in axes:
        combinations = [
            combo + [fragment] for combo in combinations for fragment in axis
        ]
    return combinations
