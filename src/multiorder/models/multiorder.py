"""Hierarchical multi-order models and their likelihood."""
from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

from multiorder.errors import DegeneracyError, PreconditionError
from .kmodel import OrderModel, Path, as_paths, fit_fixed_order_model


def fit_layers(
    S: Iterable[Sequence[int]],
    K: int,
    layers: Optional[List[OrderModel]] = None,
) -> List[OrderModel]:
    """
    Return fixed-order layers [M_0, ..., M_K] for S.

    If *layers* is given it must hold M_0.. of the same sample; it is
    extended in place up to order K and lower layers are reused.
    """
    if K < 0:
        raise ValueError(f"order must be >= 0, got {K}.")
    paths = as_paths(S)
    if layers is None:
        layers = []
    for k in range(len(layers), K + 1):
        layers.append(fit_fixed_order_model(paths, k))
    return layers[: K + 1]


def _layer_prob(layer: OrderModel, window: Path) -> float:
    try:
        return layer.probs[window]
    except KeyError:
        raise PreconditionError(
            f"context window {window} missing from the order-{layer.order} layer; "
            "layers were fitted on a different sample."
        ) from None


def fit_multi_order_model(
    S: Iterable[Sequence[int]],
    K: int,
    layers: Optional[List[OrderModel]] = None,
) -> OrderModel:
    """
    Multi-order model of maximum order K.

    P(p) = P(p0) * P(p1 | p0) * ... * P(p_{K-1} | p_0..p_{K-2})
           * prod_{j >= K} P(p_j | p_{j-K}..p_{j-1})

    The first min(K, len(p)) nodes use the layer matching their prefix
    length; every later node uses the order-K layer as a stationary
    Markov-K chain.
    """
    paths = as_paths(S)
    models = fit_layers(paths, K, layers)

    probs = {}
    for p in paths:
        if p in probs:
            continue
        pr = 1.0
        for k in range(1, min(K, len(p)) + 1):
            pr *= _layer_prob(models[k - 1], p[:k])
        for j in range(K, len(p)):
            pr *= _layer_prob(models[K], p[j - K : j + 1])
        probs[p] = pr
    return OrderModel(K, probs)


def _check_covered(model: OrderModel, paths: List[Path]) -> None:
    missing = [p for p in set(paths) if p not in model.probs]
    if missing:
        raise PreconditionError(
            f"{len(missing)} path(s) not in the model, e.g. {missing[0]}."
        )


def likelihood(model: OrderModel, S: Iterable[Sequence[int]]) -> float:
    """
    Product of model.probs[p] over every path p of S (repeats included).

    Requires every path of S to be a key of the model.
    """
    paths = as_paths(S)
    _check_covered(model, paths)
    lik = 1.0
    for p in paths:
        lik *= model.probs[p]
    return lik


def log_likelihood(model: OrderModel, S: Iterable[Sequence[int]]) -> float:
    """Natural log of likelihood(model, S), summed per path so it never underflows."""
    paths = as_paths(S)
    _check_covered(model, paths)
    total = 0.0
    for p in paths:
        pr = model.probs[p]
        if pr <= 0.0:
            raise DegeneracyError(f"path {p} has probability {pr}; log-likelihood undefined.")
        total += math.log(pr)
    return total
