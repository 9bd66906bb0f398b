"""
Select the order of a multi-order path model from the command line.

Usage:
  multiorder-select paths.txt edges.txt
  multiorder-select paths.txt edges.txt --significance 0.05 --max-order 4 -v

paths.txt holds one path per line (node ids separated by spaces or commas);
edges.txt is a 'u v' directed edge list.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from multiorder.errors import DegeneracyError, PreconditionError
from multiorder.graph.adjacency import NxAdjacency
from multiorder.io.pathsets import read_edgelist_graph, read_paths
from multiorder.selection.order import select_order


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="multiorder-select",
        description="Select the statistically justified order of a multi-order path model.",
    )
    ap.add_argument("paths", help="path sample, one path per line")
    ap.add_argument("edges", help="directed edge list 'u v'")
    ap.add_argument("--significance", type=float, default=0.01)
    ap.add_argument("--max-order", type=int, default=None)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        S = read_paths(args.paths)
        G = read_edgelist_graph(args.edges)
        # observed nodes without edges still count toward n
        G.add_nodes_from(v for p in S for v in p)
        result = select_order(
            S,
            NxAdjacency(G),
            args.significance,
            max_order=args.max_order,
        )
    except (OSError, ValueError, DegeneracyError, PreconditionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"order={result.order} stopped_reason={result.stopped_reason}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
