from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple


def iter_paths(adj: Sequence[Sequence[int]], k: int) -> Iterator[Tuple[int, ...]]:
    """
    Yield every walk with exactly k edges in the adjacency list adj.

    k = 0 yields the single-node paths (v,), k = 1 the edges (u, v).
    Longer walks extend each (k-1)-walk by every out-neighbour of its last node.
    """
    if k < 0:
        raise ValueError("k must be >= 0.")
    if k == 0:
        for v in range(len(adj)):
            yield (v,)
        return
    for p in iter_paths(adj, k - 1):
        for nbr in adj[p[-1]]:
            yield p + (nbr,)


def generate_paths(adj: Sequence[Sequence[int]], k: int) -> List[Tuple[int, ...]]:
    """List form of iter_paths."""
    return list(iter_paths(adj, k))
