from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol, Sequence, Tuple, runtime_checkable

import networkx as nx
import numpy as np
import scipy.sparse as sp


@runtime_checkable
class AdjacencyProvider(Protocol):
    """What order selection needs from a graph."""

    def node_count(self) -> int: ...

    def adjacency_power(self, k: int): ...


class NxAdjacency:
    """
    Adjacency provider backed by a networkx graph.

    Rows/columns follow the sorted node set.  adjacency_power(k) is the
    boolean k-th power as a scipy CSR array; powers are cached.
    """

    def __init__(self, G: nx.Graph):
        self.G = G
        self.nodes = sorted(G.nodes())
        A = nx.to_scipy_sparse_array(G, nodelist=self.nodes, weight=None, dtype=np.int64, format="csr")
        A.data[:] = 1
        self._base = A
        self._powers: Dict[int, sp.csr_array] = {1: A}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[int, int]],
        nodes: Optional[Iterable[int]] = None,
    ) -> "NxAdjacency":
        G = nx.DiGraph()
        if nodes is not None:
            G.add_nodes_from(nodes)
        G.add_edges_from(edges)
        return cls(G)

    @classmethod
    def from_adjlist(cls, adj: Sequence[Sequence[int]]) -> "NxAdjacency":
        """adj[u] = out-neighbours of u, nodes 0..len(adj)-1."""
        G = nx.DiGraph()
        G.add_nodes_from(range(len(adj)))
        G.add_edges_from((u, v) for u, neigh in enumerate(adj) for v in neigh)
        return cls(G)

    def node_count(self) -> int:
        return self.G.number_of_nodes()

    def adjacency_power(self, k: int) -> sp.csr_array:
        if k < 0:
            raise ValueError(f"power must be >= 0, got {k}.")
        if k == 0:
            return sp.csr_array(sp.identity(len(self.nodes), dtype=bool, format="csr"))
        top = max(self._powers)
        while top < k:
            nxt = (self._powers[top] @ self._base).tocsr()
            nxt.eliminate_zeros()
            # keep 0/1 entries so repeated products never grow
            nxt.data[:] = 1
            top += 1
            self._powers[top] = nxt
        return self._powers[k].astype(bool)
