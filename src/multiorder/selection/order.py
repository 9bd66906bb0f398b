"""Order selection by nested likelihood-ratio tests.

Starting from K = 1, the multi-order model of order K is compared with the
one of order K+1.  The p-value of the likelihood-ratio statistic
2 * (log L_{K+1} - log L_K) against a chi-squared law whose degrees of
freedom are the difference of the two models' parameter counts decides
the next step: p < significance stops the search at K, anything else
adopts K+1 as the new baseline.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import scipy.sparse as sp
from scipy.stats import chi2

from multiorder.errors import DegeneracyError
from multiorder.graph.adjacency import AdjacencyProvider
from multiorder.models.kmodel import OrderModel, as_paths
from multiorder.models.multiorder import fit_multi_order_model, log_likelihood

logger = logging.getLogger(__name__)


def matrix_df(Ak) -> int:
    """
    Free parameters added by conditioning on k-step reachability:
    (# nonzero entries of A^k) - (# rows of A^k with a nonzero entry).
    """
    if sp.issparse(Ak):
        total = int(Ak.count_nonzero())
    else:
        total = int(np.count_nonzero(Ak))
    row_hits = np.asarray(Ak.sum(axis=1)).ravel()
    return total - int(np.count_nonzero(row_hits))


def degrees_of_freedom(graph: AdjacencyProvider, K: int) -> int:
    """(n - 1) + sum_{k=1..K} matrix_df(A^k)."""
    if K < 0:
        raise ValueError(f"order must be >= 0, got {K}.")
    return (graph.node_count() - 1) + sum(
        matrix_df(graph.adjacency_power(k)) for k in range(1, K + 1)
    )


def lrt_p_value(ll_small: float, ll_large: float, ddf: int) -> float:
    """
    Survival function of chi2(ddf) at 2 * (ll_large - ll_small).

    ll_* are natural-log likelihoods of the nested models on one sample.
    chi2(0) is a point mass at 0, so ddf == 0 gives p = 0.
    """
    if ddf < 0:
        raise DegeneracyError(f"larger model has fewer degrees of freedom (ddf={ddf}).")
    stat = 2.0 * (ll_large - ll_small)
    if not math.isfinite(stat):
        raise DegeneracyError(f"likelihood-ratio statistic is not finite ({stat}).")
    if ddf == 0:
        return 0.0
    return float(chi2.sf(stat, ddf))


@dataclass(frozen=True)
class OrderSelection:
    """
    Outcome of select_order.

    order, model: the accepted order and its multi-order model.
    stopped_reason: "significant" | "k_cap"
    p_values: (K, K+1, p) for every comparison made, in order.

    Unpacks as (order, model).
    """

    order: int
    model: OrderModel
    stopped_reason: str
    p_values: Tuple[Tuple[int, int, float], ...] = ()

    def __iter__(self) -> Iterator:
        return iter((self.order, self.model))


def _check_graph(graph: object) -> None:
    for name in ("node_count", "adjacency_power"):
        if not callable(getattr(graph, name, None)):
            raise TypeError(f"graph must provide {name}(); got {type(graph).__name__}.")


def select_order(
    S: Iterable[Sequence[int]],
    graph: AdjacencyProvider,
    significance: float = 0.01,
    *,
    max_order: Optional[int] = None,
) -> OrderSelection:
    """
    Choose the order of the multi-order model for the path sample S.

    max_order caps the largest model ever fitted; by default it is the
    longest path length minus one, past which all larger models coincide.
    Reaching the cap ends the search with stopped_reason="k_cap".
    The search starts at order 1, so an explicit max_order must be >= 1.
    """
    _check_graph(graph)
    if not 0.0 < significance <= 1.0:
        raise ValueError("significance must be in (0, 1].")
    paths = as_paths(S)
    if max_order is None:
        max_order = max(len(p) for p in paths) - 1
    elif max_order < 1:
        raise ValueError(f"max_order must be >= 1, got {max_order}.")

    layers: List[OrderModel] = []
    K = 1
    M_k = fit_multi_order_model(paths, K, layers)
    ll_k = log_likelihood(M_k, paths)
    df_k = degrees_of_freedom(graph, K)
    tested: List[Tuple[int, int, float]] = []

    while K + 1 <= max_order:
        M_K = fit_multi_order_model(paths, K + 1, layers)
        ll_K = log_likelihood(M_K, paths)
        df_K = degrees_of_freedom(graph, K + 1)

        p = lrt_p_value(ll_k, ll_K, df_K - df_k)
        tested.append((K, K + 1, p))
        logger.debug(
            "K=%d vs K=%d: stat=%.6g ddf=%d p=%.6g",
            K, K + 1, 2.0 * (ll_K - ll_k), df_K - df_k, p,
        )

        if p < significance:
            logger.info("selected order %d (p=%.6g < %g)", K, p, significance)
            return OrderSelection(K, M_k, "significant", tuple(tested))

        K += 1
        M_k, ll_k, df_k = M_K, ll_K, df_K

    logger.info("no significant order found up to %d; returning %d", max_order, K)
    return OrderSelection(K, M_k, "k_cap", tuple(tested))
