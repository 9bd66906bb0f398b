from __future__ import annotations

import re
from typing import Iterable, List, TextIO, Tuple, Union

import networkx as nx

_SEP = re.compile(r"[,\s]+")


def parse_path_line(line: str) -> Tuple[int, ...]:
    """
    Parse one path such as '1 2 3' or '1,2,3'.

    Returns () for blank lines and '#' comments.
    """
    s = line.split("#", 1)[0].strip()
    if not s:
        return ()
    return tuple(int(tok) for tok in _SEP.split(s) if tok)


def read_paths(src: Union[str, TextIO, Iterable[str]]) -> List[Tuple[int, ...]]:
    """
    Read a path sample, one path per line.

    *src* is a filename or an iterable of lines (an open file works).
    """
    if isinstance(src, str):
        with open(src, encoding="utf-8") as fh:
            return read_paths(fh)
    out: List[Tuple[int, ...]] = []
    for line in src:
        p = parse_path_line(line)
        if p:
            out.append(p)
    return out


def read_edgelist_graph(src: Union[str, TextIO]) -> nx.DiGraph:
    """
    Read a directed graph from a 'u v' edge list with integer node ids.
    """
    return nx.read_edgelist(src, nodetype=int, create_using=nx.DiGraph, data=False)
