from .adjacency import AdjacencyProvider, NxAdjacency
from .paths import generate_paths, iter_paths

__all__ = [
    "AdjacencyProvider",
    "NxAdjacency",
    "generate_paths",
    "iter_paths",
]
