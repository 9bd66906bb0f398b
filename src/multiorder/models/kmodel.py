"""Fixed-order maximum-likelihood path models.

A model of order k maps every observed window of k+1 consecutive nodes to
the empirical probability of its last node given the first k.  Windows
(and contexts) that never occur are absent from the mapping; they are not
assigned probability 0.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from multiorder.errors import PreconditionError

Path = Tuple[int, ...]


def as_paths(S: Iterable[Sequence[int]]) -> List[Path]:
    """
    Normalise a path sample to a list of int tuples.

    Duplicates are kept (they carry frequency).  Raises ValueError for an
    empty sample or an empty path.
    """
    paths: List[Path] = []
    for q in S:
        p = tuple(int(v) for v in q)
        if len(p) == 0:
            raise ValueError("paths must contain at least one node.")
        paths.append(p)
    if not paths:
        raise ValueError("path sample must be non-empty.")
    return paths


@dataclass(frozen=True)
class OrderModel:
    """
    Path probability table of a given order.

    order: k for a fixed-order model, K for a multi-order model.
    probs: for a fixed-order model, window (length k+1) -> P(last | first k);
           for a multi-order model, full observed path -> P(path).
    """

    order: int
    probs: Dict[Path, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.order < 0:
            raise ValueError(f"order must be >= 0, got {self.order}.")

    def __len__(self) -> int:
        return len(self.probs)

    def __contains__(self, path: object) -> bool:
        return path in self.probs

    def prob(self, path: Sequence[int]) -> float:
        key = tuple(path)
        try:
            return self.probs[key]
        except KeyError:
            raise PreconditionError(
                f"path {key} is not in the order-{self.order} model."
            ) from None

    def copy(self) -> "OrderModel":
        return OrderModel(self.order, dict(self.probs))


def fit_fixed_order_model(S: Iterable[Sequence[int]], k: int) -> OrderModel:
    """
    Maximum-likelihood model of order k for the sample S.

    Every window p = q[i:i+k+1] of every path q counts once toward p and
    once toward its context p[:k]; P[p] = count(p) / count(p[:k]).
    For k = 0 the context is empty and this is the node frequency.
    """
    if k < 0:
        raise ValueError(f"order must be >= 0, got {k}.")
    paths = as_paths(S)

    p_counts: Counter[Path] = Counter()
    w_counts: Counter[Path] = Counter()
    for q in paths:
        for i in range(len(q) - k):
            window = q[i : i + k + 1]
            p_counts[window] += 1
            w_counts[window[:k]] += 1

    probs = {p: c / w_counts[p[:k]] for p, c in p_counts.items()}
    return OrderModel(k, probs)
