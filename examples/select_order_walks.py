"""
Fit multi-order models to every walk of a small graph and select the order.

The sample is the multiset of all walks with 1..max_len edges on the
4-node graph 0->1, 1->3, 1->2, 2->0, 3->0, 3->1.  Walk enumeration weighs
every continuation equally, so the order should stay low.

Usage:
  python3 select_order_walks.py --max-len 5
  python3 select_order_walks.py --max-len 4 --significance 0.05 --max-order 3
"""
import argparse
import logging

from multiorder import (
    NxAdjacency,
    fit_multi_order_model,
    generate_paths,
    log_likelihood,
    select_order,
)

AL = [[1], [3, 2], [0], [0, 1]]


def run(max_len, significance, max_order):
    paths = []
    for k in range(1, max_len + 1):
        paths.extend(generate_paths(AL, k))
    print(f"{len(paths)} walks with 1..{max_len} edges")

    for K in range(0, max_len + 1):
        M = fit_multi_order_model(paths, K)
        print(f"  K={K}: log L = {log_likelihood(M, paths):.4f}")

    res = select_order(paths, NxAdjacency.from_adjlist(AL), significance, max_order=max_order)
    for K, K1, p in res.p_values:
        print(f"  {K} vs {K1}: p = {p:.4g}")
    print(f"selected order {res.order} ({res.stopped_reason})")


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--max-len', type=int, default=5)
    parser.add_argument('--significance', type=float, default=0.01)
    parser.add_argument('--max-order', type=int, default=None)
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    run(args.max_len, args.significance, args.max_order)
